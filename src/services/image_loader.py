"""
Lookup-or-populate loading of recipe photos.
"""
from __future__ import annotations

import logging
from io import BytesIO

from PIL import Image, UnidentifiedImageError
from starlette.concurrency import run_in_threadpool

from src.app.infra.transport.base import Transport
from src.services.errors import ImageLoadError
from src.services.image_cache import ImageCache

logger = logging.getLogger(__name__)


def decode_image(url: str, content: bytes) -> Image.Image:
    try:
        img = Image.open(BytesIO(content))
        # Image.open is lazy; force the pixel data so later reads never touch the buffer.
        img.load()
    except (UnidentifiedImageError, OSError) as error:
        raise ImageLoadError(url, f"undecodable image data: {error}") from error
    return img


class ImageLoader:
    def __init__(self, transport: Transport, cache: ImageCache):
        self._transport = transport
        self._cache = cache

    async def load(self, url: object) -> Image.Image:
        """
        Return the decoded image for ``url``, from the cache when present.

        On a miss the image is downloaded, decoded and stored. Failed loads
        leave the cache untouched.

        Raises:
            ImageLoadError: transport failure, non-2xx status or bad bytes.
        """
        key = str(url)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        logger.debug("Image cache miss: %s", key)
        try:
            response = await self._transport.get(key)
        except Exception as error:
            logger.warning("Transport failure loading image %s: %s", key, error)
            raise ImageLoadError(key, f"transport failure: {error}") from error

        if not response.is_success:
            logger.warning("Unexpected status loading image %s: %s", key, response.status_code)
            raise ImageLoadError(key, f"unexpected status {response.status_code}")

        img = await run_in_threadpool(decode_image, key, response.content)
        self._cache.put(key, img)
        return img
