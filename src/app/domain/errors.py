from __future__ import annotations

from typing import Optional, Sequence, Union

PathItem = Union[str, int]


class RecipeFetchError(Exception):
    pass


class TransportError(RecipeFetchError):
    def __init__(self, cause: BaseException):
        super().__init__(f"Transport failure: {cause!r}")
        self.cause = cause


class InvalidResponseError(RecipeFetchError):
    def __init__(self, status_code: Optional[int] = None):
        if status_code is None:
            message = "Invalid response: no HTTP status"
        else:
            message = f"Invalid response status: {status_code}"
        super().__init__(message)
        self.status_code = status_code


class MissingDataError(RecipeFetchError):
    def __init__(self, message: str = "Response has no 'recipes' key"):
        super().__init__(message)


class DecodeError(RecipeFetchError):
    def __init__(
        self,
        path: Sequence[PathItem],
        reason: str,
        index: Optional[int] = None,
    ):
        self.path = list(path)
        self.reason = reason
        self.index = index
        parts = [str(part) for part in self.path]
        if index is not None:
            parts.insert(0, f"recipes[{index}]")
        location = ".".join(parts) or "<root>"
        super().__init__(f"Failed to decode {location}: {reason}")
