"""Restaurant data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Restaurant(BaseModel):
    """Restaurant information."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str = Field(..., description="Restaurant identifier")
    name: str = Field(..., description="Restaurant name")
    cuisine_type: str = Field(..., description="Type of cuisine")
    address: str = Field(..., description="Restaurant address")
    price_range: str | None = Field(None, description="Price range, e.g. $$")
    created_at: datetime = Field(..., description="When the restaurant was added")
