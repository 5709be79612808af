from __future__ import annotations

import threading
from typing import Any, Dict, Optional


class ImageCache:
    """
    In-memory map from image URL to an already decoded image.

    Entries live until ``clear()`` or process exit; there is no size bound
    and no eviction. Safe to share between threads and event-loop tasks.
    """

    def __init__(self) -> None:
        self._images: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, url: object) -> Optional[Any]:
        with self._lock:
            return self._images.get(str(url))

    def put(self, url: object, image: Any) -> None:
        with self._lock:
            self._images[str(url)] = image

    def clear(self) -> None:
        with self._lock:
            self._images.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._images)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return str(url) in self._images
