from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from src.app.domain.errors import InvalidResponseError, MissingDataError
from src.app.domain.models import Recipe
from src.services.recipe_service import RecipeServiceProtocol

log = logging.getLogger("recipe_state")

INVALID_RESPONSE_MESSAGE = "Invalid server response. Please try again later."
MISSING_DATA_MESSAGE = "Unable to load recipes data."
GENERIC_FAILURE_MESSAGE = "Failed to load recipes. Please check your connection."


def error_message_for(error: BaseException) -> str:
    if isinstance(error, InvalidResponseError):
        return INVALID_RESPONSE_MESSAGE
    if isinstance(error, MissingDataError):
        return MISSING_DATA_MESSAGE
    return GENERIC_FAILURE_MESSAGE


class RecipeListState:
    """
    What the recipe list screen shows: the latest recipes, the latest error
    and whether a load is running.

    Loads may overlap (first load plus a refresh). Only the most recently
    started load is allowed to publish its outcome.
    """

    def __init__(self, service: RecipeServiceProtocol):
        self._service = service
        self.recipes: list[Recipe] = []
        self.error_message: Optional[str] = None
        self.has_loaded = False
        self._issued = 0
        self._in_flight = 0

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    async def load_recipes(self) -> None:
        self._issued += 1
        ticket = self._issued
        self._in_flight += 1
        try:
            recipes = await self._service.fetch_recipes()
        except Exception as error:
            if ticket != self._issued:
                log.info("Discarding failure of superseded load #%d: %s", ticket, error)
                return
            log.warning("Recipe load failed: %s", error)
            self.error_message = error_message_for(error)
            self.has_loaded = True
        else:
            if ticket != self._issued:
                log.info("Discarding result of superseded load #%d", ticket)
                return
            self.recipes = recipes
            self.error_message = None
            self.has_loaded = True
        finally:
            self._in_flight -= 1

    def find(self, recipe_id: UUID) -> Optional[Recipe]:
        return next((recipe for recipe in self.recipes if recipe.id == recipe_id), None)
