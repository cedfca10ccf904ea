"""Post, comment and reaction Pydantic schemas."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostOptions(BaseModel):
    """Presentation options attached to a post."""

    background_color: str | None = Field(
        None,
        alias="backgroundColor",
        description="Optional hex color code (e.g., #FFEEAA)",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("background_color")
    @classmethod
    def validate_background_color(cls, v: str | None) -> str | None:
        """Validate the background color is a hex color code."""
        if v is None:
            return v
        if not re.match(r"^#[0-9A-Fa-f]{6}$", v):
            raise ValueError("Background color must be a valid hex color code (e.g., #FFEEAA)")
        return v


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    content: str = Field(..., min_length=1, max_length=5000)
    options: PostOptions | None = None


class PostUpdate(BaseModel):
    """Schema for editing a post; omitted fields are left unchanged."""

    content: str | None = Field(None, min_length=1, max_length=5000)
    options: PostOptions | None = None


class CommentCreate(BaseModel):
    """Schema for commenting on a post or another comment."""

    content: str = Field(..., min_length=1, max_length=5000)
    parent: str = Field(..., description="Id of the post or comment being replied to")


class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)


class ReactionCreate(BaseModel):
    """Schema for reacting to a post or comment."""

    type: str = Field(..., min_length=1, max_length=64, description="Free-form reaction tag")
    item: str = Field(..., description="Id of the post or comment reacted to")
