import argparse
import asyncio
import logging
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from src.app.config import settings
from src.app.domain.errors import RecipeFetchError
from src.app.infra.transport.httpx_transport import HttpxTransport
from src.services.ids import youtube_embed_url
from src.services.recipe_service import RecipeService


async def run_fetch(base_url: str, timeout: float, cuisine: str | None, limit: int) -> int:
    transport = HttpxTransport(timeout=timeout)
    try:
        service = RecipeService(transport, base_url=base_url)
        print("===", service.recipes_url)
        try:
            recipes = await service.fetch_recipes()
        except RecipeFetchError as error:
            print(f"error: {type(error).__name__}: {error}")
            return 1
    finally:
        await transport.aclose()

    if cuisine:
        recipes = [r for r in recipes if r.cuisine.lower() == cuisine.lower()]

    print("count:", len(recipes))
    for recipe in recipes[:limit]:
        print(f"- {recipe.name} ({recipe.cuisine}) id={recipe.id}")
        print("  thumbnail:", recipe.photo_url_small)
        print("  source:", recipe.source_url)
        print("  video:", youtube_embed_url(recipe.youtube_url))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch the recipe list once and print it")
    parser.add_argument("--base-url", default=settings.RECIPES_BASE_URL)
    parser.add_argument("--timeout", type=float, default=settings.HTTP_TIMEOUT_SECONDS)
    parser.add_argument("--cuisine", help="Only show recipes of this cuisine")
    parser.add_argument("--limit", type=int, default=20)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    sys.exit(asyncio.run(run_fetch(args.base_url, args.timeout, args.cuisine, args.limit)))


if __name__ == "__main__":
    main()
