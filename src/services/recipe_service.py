from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from src.app.config import DEFAULT_RECIPES_BASE_URL
from src.app.domain.errors import (
    DecodeError,
    InvalidResponseError,
    MissingDataError,
    TransportError,
)
from src.app.domain.models import Recipe
from src.app.infra.transport.base import Transport

logger = logging.getLogger(__name__)

RECIPES_PATH = "/recipes.json"
RECIPES_KEY = "recipes"


class RecipeServiceProtocol(ABC):
    @abstractmethod
    async def fetch_recipes(self) -> list[Recipe]:
        pass


def _parse_json(content: bytes) -> Any:
    try:
        return json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as error:
        raise DecodeError([], f"Body is not valid JSON: {error}") from error


def _decode_recipe(payload: Any, index: int) -> Recipe:
    try:
        return Recipe.from_wire(payload)
    except ValidationError as error:
        first = error.errors()[0]
        raise DecodeError(list(first["loc"]), first["msg"], index=index) from error


def decode_recipes(content: bytes) -> list[Recipe]:
    """
    Decode a ``{"recipes": [...]}`` envelope.

    Raises:
        MissingDataError: the body is a JSON object without ``recipes``.
        DecodeError: anything else structurally wrong; no partial result.
    """
    envelope = _parse_json(content)
    if not isinstance(envelope, dict):
        raise DecodeError([], f"Expected a JSON object, got {type(envelope).__name__}")

    if RECIPES_KEY not in envelope:
        raise MissingDataError()

    items = envelope[RECIPES_KEY]
    if not isinstance(items, list):
        raise DecodeError([RECIPES_KEY], f"Expected an array, got {type(items).__name__}")

    return [_decode_recipe(item, index) for index, item in enumerate(items)]


class RecipeService(RecipeServiceProtocol):
    """
    Fetches the recipe catalogue: one GET, status check, envelope decode.

    Every call goes to the network; nothing is cached between calls.
    """

    def __init__(
        self,
        transport: Transport,
        base_url: str = DEFAULT_RECIPES_BASE_URL,
    ):
        self._transport = transport
        self.recipes_url = f"{base_url.rstrip('/')}{RECIPES_PATH}"

    async def fetch_recipes(self) -> list[Recipe]:
        try:
            response = await self._transport.get(self.recipes_url)
        except Exception as error:
            logger.warning("Transport failure fetching %s: %s", self.recipes_url, error)
            raise TransportError(error) from error

        if not response.is_success:
            logger.warning(
                "Unexpected status fetching %s: %s", self.recipes_url, response.status_code
            )
            raise InvalidResponseError(response.status_code)

        try:
            recipes = decode_recipes(response.content)
        except (MissingDataError, DecodeError) as error:
            logger.warning("Could not decode recipes from %s: %s", self.recipes_url, error)
            raise

        logger.info("Fetched %d recipes from %s", len(recipes), self.recipes_url)
        return recipes
