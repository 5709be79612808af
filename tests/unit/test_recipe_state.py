from __future__ import annotations

import asyncio
from typing import Optional
from uuid import UUID, uuid4

import pytest

from src.app.domain.errors import (
    DecodeError,
    InvalidResponseError,
    MissingDataError,
    TransportError,
)
from src.app.domain.models import Recipe
from src.services.recipe_service import RecipeServiceProtocol
from src.services.recipe_state import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_RESPONSE_MESSAGE,
    MISSING_DATA_MESSAGE,
    RecipeListState,
    error_message_for,
)


def make_recipe(name: str = "Spaghetti Carbonara") -> Recipe:
    return Recipe(uuid=uuid4(), name=name, cuisine="Italian")


class RecipeServiceStub(RecipeServiceProtocol):
    def __init__(self) -> None:
        self.recipes_to_return: list[Recipe] = []
        self.error: Optional[Exception] = None
        self.calls = 0

    async def fetch_recipes(self) -> list[Recipe]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.recipes_to_return


class GatedRecipeService(RecipeServiceProtocol):
    """Each call blocks until the test releases it with a result."""

    def __init__(self) -> None:
        self.pending: list[asyncio.Future] = []

    async def fetch_recipes(self) -> list[Recipe]:
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future


class TestErrorMessageFor:
    def test_invalid_response(self) -> None:
        assert error_message_for(InvalidResponseError(500)) == INVALID_RESPONSE_MESSAGE

    def test_missing_data(self) -> None:
        assert error_message_for(MissingDataError()) == MISSING_DATA_MESSAGE

    @pytest.mark.parametrize(
        "error",
        [
            TransportError(ConnectionError("offline")),
            DecodeError(["uuid"], "bad"),
            RuntimeError("unexpected"),
        ],
    )
    def test_everything_else_falls_back_to_generic(self, error: Exception) -> None:
        assert error_message_for(error) == GENERIC_FAILURE_MESSAGE


class TestRecipeListState:
    def test_initial_state(self) -> None:
        state = RecipeListState(RecipeServiceStub())

        assert state.recipes == []
        assert state.error_message is None
        assert state.is_loading is False
        assert state.has_loaded is False

    @pytest.mark.asyncio
    async def test_load_success_updates_recipes(self) -> None:
        service = RecipeServiceStub()
        service.recipes_to_return = [make_recipe()]
        state = RecipeListState(service)

        await state.load_recipes()

        assert state.recipes == service.recipes_to_return
        assert state.error_message is None
        assert state.has_loaded is True
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_load_failure_sets_generic_message(self) -> None:
        service = RecipeServiceStub()
        service.error = RuntimeError("mock error")
        state = RecipeListState(service)

        await state.load_recipes()

        assert state.recipes == []
        assert state.error_message == GENERIC_FAILURE_MESSAGE
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_specific_error_messages(self) -> None:
        service = RecipeServiceStub()
        state = RecipeListState(service)

        service.error = InvalidResponseError(503)
        await state.load_recipes()
        assert state.error_message == INVALID_RESPONSE_MESSAGE

        service.error = MissingDataError()
        await state.load_recipes()
        assert state.error_message == MISSING_DATA_MESSAGE

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_recipes(self) -> None:
        service = RecipeServiceStub()
        service.recipes_to_return = [make_recipe()]
        state = RecipeListState(service)
        await state.load_recipes()

        service.error = InvalidResponseError(500)
        await state.load_recipes()

        assert len(state.recipes) == 1
        assert state.error_message == INVALID_RESPONSE_MESSAGE

    @pytest.mark.asyncio
    async def test_success_clears_previous_error(self) -> None:
        service = RecipeServiceStub()
        service.error = MissingDataError()
        state = RecipeListState(service)
        await state.load_recipes()

        service.error = None
        service.recipes_to_return = [make_recipe()]
        await state.load_recipes()

        assert state.error_message is None
        assert len(state.recipes) == 1

    @pytest.mark.asyncio
    async def test_refresh_replaces_whole_list(self) -> None:
        service = RecipeServiceStub()
        service.recipes_to_return = [make_recipe("A"), make_recipe("B")]
        state = RecipeListState(service)
        await state.load_recipes()

        service.recipes_to_return = [make_recipe("C")]
        await state.load_recipes()

        assert [r.name for r in state.recipes] == ["C"]

    @pytest.mark.asyncio
    async def test_find(self) -> None:
        service = RecipeServiceStub()
        wanted = make_recipe("Wanted")
        service.recipes_to_return = [make_recipe("Other"), wanted]
        state = RecipeListState(service)
        await state.load_recipes()

        assert state.find(wanted.id) is wanted
        assert state.find(UUID(int=0)) is None


class TestOverlappingLoads:
    @pytest.mark.asyncio
    async def test_stale_completion_is_discarded(self) -> None:
        service = GatedRecipeService()
        state = RecipeListState(service)
        first = asyncio.create_task(state.load_recipes())
        await asyncio.sleep(0)
        second = asyncio.create_task(state.load_recipes())
        await asyncio.sleep(0)

        assert state.is_loading is True
        newer = [make_recipe("Newer")]
        older = [make_recipe("Older")]
        service.pending[1].set_result(newer)
        await second
        assert state.is_loading is True

        service.pending[0].set_result(older)
        await first

        assert state.recipes == newer
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_stale_failure_does_not_set_error(self) -> None:
        service = GatedRecipeService()
        state = RecipeListState(service)
        first = asyncio.create_task(state.load_recipes())
        await asyncio.sleep(0)
        second = asyncio.create_task(state.load_recipes())
        await asyncio.sleep(0)

        service.pending[1].set_result([make_recipe()])
        await second
        service.pending[0].set_exception(TransportError(ConnectionError("offline")))
        await first

        assert state.error_message is None
        assert len(state.recipes) == 1
