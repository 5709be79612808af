# src/app/deps.py
from __future__ import annotations

from fastapi import Request

from src.services.image_cache import ImageCache
from src.services.image_loader import ImageLoader
from src.services.recipe_state import RecipeListState


def get_recipe_state(request: Request) -> RecipeListState:
    return request.app.state.recipe_state


def get_image_cache(request: Request) -> ImageCache:
    return request.app.state.image_cache


def get_image_loader(request: Request) -> ImageLoader:
    return request.app.state.image_loader
