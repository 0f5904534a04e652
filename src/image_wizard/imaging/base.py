"""Boundary protocol for the image-operation collaborator."""

from __future__ import annotations

from typing import Protocol


class ImageOperations(Protocol):
    """Synchronous operations that overwrite the file at ``path`` in place.

    Every method raises ``ImageOperationError`` on failure and returns only
    once the file has been written.
    """

    def open_and_validate(self, path: str) -> None:
        """Raise unless ``path`` opens as a readable image."""
        ...

    def resize(self, path: str, width: int, height: int) -> None:
        ...

    def grayscale(self, path: str) -> None:
        ...

    def blur(self, path: str, strength: float) -> None:
        ...


__all__ = ["ImageOperations"]
