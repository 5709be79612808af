from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from src.app.domain.models import Recipe
from src.services.ids import youtube_embed_url


def _url(value: object) -> Optional[str]:
    return None if value is None else str(value)


class RecipeSummary(BaseModel):
    id: str
    name: str
    cuisine: str
    thumbnailUrl: Optional[str] = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> RecipeSummary:
        return cls(
            id=str(recipe.id),
            name=recipe.name,
            cuisine=recipe.cuisine,
            thumbnailUrl=_url(recipe.photo_url_small),
        )


class RecipeDetail(BaseModel):
    id: str
    name: str
    cuisine: str
    thumbnailUrl: Optional[str] = None
    photoUrlLarge: Optional[str] = None
    sourceUrl: Optional[str] = None
    youtubeUrl: Optional[str] = None
    youtubeEmbedUrl: Optional[str] = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> RecipeDetail:
        return cls(
            id=str(recipe.id),
            name=recipe.name,
            cuisine=recipe.cuisine,
            thumbnailUrl=_url(recipe.photo_url_small),
            photoUrlLarge=_url(recipe.photo_url_large),
            sourceUrl=_url(recipe.source_url),
            youtubeUrl=_url(recipe.youtube_url),
            youtubeEmbedUrl=youtube_embed_url(recipe.youtube_url),
        )


class RecipeListResponse(BaseModel):
    recipes: list[RecipeSummary] = Field(default_factory=list)
    error: Optional[str] = None
    isLoading: bool = False
