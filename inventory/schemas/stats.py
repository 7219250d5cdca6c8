from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StatsResponse(BaseModel):
    """Dashboard aggregates, serialized in camelCase."""
    total_products: int
    total_categories: int
    total_suppliers: int
    low_stock_products: int
    total_stock_value: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
