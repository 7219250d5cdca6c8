from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory.api.deps import require_auth
from inventory.database import get_db
from inventory.schemas.stats import StatsResponse
from inventory.services.stats_service import StatsService

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get(
    "",
    response_model=StatsResponse,
    summary="Inventory statistics",
    description="Counts, low-stock products and total stock value."
)
def get_stats(db: Session = Depends(get_db), _=Depends(require_auth)):
    return StatsService(db).compute()
