# src/app/routers/recipes.py
from __future__ import annotations

import logging
from io import BytesIO
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from PIL import Image
from starlette.concurrency import run_in_threadpool

from src.app.deps import get_image_cache, get_image_loader, get_recipe_state
from src.app.domain.models import Recipe
from src.app.schemas.recipes import RecipeDetail, RecipeListResponse, RecipeSummary
from src.services.errors import ImageLoadError
from src.services.image_cache import ImageCache
from src.services.image_loader import ImageLoader
from src.services.recipe_state import RecipeListState

log = logging.getLogger("recipes")
router = APIRouter(tags=["recipes"])

_PNG_MODES = {"1", "L", "LA", "P", "RGB", "RGBA"}


def _encode_png(img: Image.Image) -> bytes:
    if img.mode not in _PNG_MODES:
        img = img.convert("RGB")
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def _require_recipe(state: RecipeListState, recipe_id: UUID) -> Recipe:
    recipe = state.find(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe not found: {recipe_id}")
    return recipe


@router.get("/recipes", response_model=RecipeListResponse)
async def list_recipes(
    refresh: bool = Query(default=False),
    state: RecipeListState = Depends(get_recipe_state),
) -> RecipeListResponse:
    if refresh or not state.has_loaded:
        await state.load_recipes()
    return RecipeListResponse(
        recipes=[RecipeSummary.from_recipe(recipe) for recipe in state.recipes],
        error=state.error_message,
        isLoading=state.is_loading,
    )


@router.get("/recipes/{recipe_id}", response_model=RecipeDetail)
async def get_recipe(
    recipe_id: UUID,
    state: RecipeListState = Depends(get_recipe_state),
) -> RecipeDetail:
    return RecipeDetail.from_recipe(_require_recipe(state, recipe_id))


@router.get("/recipes/{recipe_id}/photo")
async def get_recipe_photo(
    recipe_id: UUID,
    size: Literal["small", "large"] = Query(default="small"),
    state: RecipeListState = Depends(get_recipe_state),
    loader: ImageLoader = Depends(get_image_loader),
) -> Response:
    recipe = _require_recipe(state, recipe_id)
    url = recipe.photo_url_small if size == "small" else recipe.photo_url_large
    if url is None:
        raise HTTPException(status_code=404, detail=f"Recipe has no {size} photo")

    try:
        img = await loader.load(url)
    except ImageLoadError as exc:
        raise HTTPException(status_code=502, detail=str(exc))

    content = await run_in_threadpool(_encode_png, img)
    return Response(content=content, media_type="image/png")


@router.post("/images/cache/clear", status_code=status.HTTP_204_NO_CONTENT)
async def clear_image_cache(
    cache: ImageCache = Depends(get_image_cache),
) -> Response:
    log.info("Clearing %d cached images", len(cache))
    cache.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
