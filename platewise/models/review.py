"""Data models for reviews and their authors."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Profile(BaseModel):
    """Public identity of a reviewing user."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    # The joined projection only selects username and avatar_url
    id: str | None = Field(None, description="Profile identifier")
    username: str | None = Field(None, description="Display username")
    avatar_url: str | None = Field(None, description="Avatar storage reference")


class Review(BaseModel):
    """A user-authored rating with optional images."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    id: str = Field(..., description="Review identifier")
    rating: int = Field(..., description="Star rating, expected 0-5")
    content: str = Field(..., description="Review text")
    images: list[str] | None = Field(None, description="Image storage keys")
    created_at: datetime = Field(..., description="When the review was posted")
    profile: Profile | None = Field(
        None, alias="profiles", description="Joined author profile"
    )
