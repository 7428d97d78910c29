"""Toast notification model."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ToastVariant(str, Enum):
    """Visual severity of a toast."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Toast(BaseModel):
    """A transient user notification."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Toast identifier")
    title: str = Field(..., description="Toast title")
    description: str | None = Field(None, description="Toast body text")
    variant: ToastVariant = Field(
        default=ToastVariant.DEFAULT, description="Toast severity"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now, description="When the toast was raised"
    )
