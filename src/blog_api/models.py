"""Pydantic models for blog posts."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostCreate(BaseModel):
    """Request body for creating a post. Unknown keys (including ``id``) are ignored."""

    model_config = ConfigDict(strict=True)

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1)

    @field_validator("title", "content", "author", mode="before")
    @classmethod
    def _null_is_blank(cls, v: object) -> object:
        # null reads as an empty value, so it fails the non-empty check
        return "" if v is None else v


class Post(BaseModel):
    """A stored post. The id is assigned by the store and never changes."""

    model_config = ConfigDict(strict=True, frozen=True)

    id: int = Field(gt=0, description="Store-assigned identifier")
    title: str
    content: str
    author: str
