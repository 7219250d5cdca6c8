from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Schema for responses that only carry a confirmation message."""
    message: str
