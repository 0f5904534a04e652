"""Pillow-backed implementation of the wizard's image operations."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from PIL import Image, ImageFilter

from image_wizard.errors import ImageOperationError
from image_wizard.runtime import telemetry

_LOGGER = "image_wizard.imaging"
# Modes Pillow cannot resample or filter without dropping to nearest/raising.
_PALETTE_MODES = {"P", "PA", "1"}


def fit_within(size: Tuple[int, int], bounds: Tuple[int, int]) -> Tuple[int, int]:
    """Largest size with the aspect ratio of ``size`` that fits in ``bounds``."""

    width, height = size
    max_width, max_height = bounds
    ratio = min(max_width / width, max_height / height)
    return (
        max(1, min(max_width, round(width * ratio))),
        max(1, min(max_height, round(height * ratio))),
    )


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in {"RGBA", "LA", "PA", "La", "RGBa"} or (
        "transparency" in image.info
    )


def _can_save(image_format: Optional[str]) -> bool:
    if image_format is None:
        return True
    Image.init()
    return image_format.upper() in Image.SAVE


def _filterable(image: Image.Image) -> Image.Image:
    if image.mode in _PALETTE_MODES:
        return image.convert("RGBA" if _has_alpha(image) else "RGB")
    return image


class PillowImageOperations:
    """Opens, transforms, and overwrites image files with Pillow."""

    def __init__(self, *, resample: Image.Resampling = Image.Resampling.BILINEAR) -> None:
        # BILINEAR is Pillow's triangle filter.
        self.resample = resample
        self.logger = telemetry.get_logger(_LOGGER)

    def open_and_validate(self, path: str) -> None:
        with self._operation("open", path):
            with Image.open(path) as image:
                image.verify()

    def resize(self, path: str, width: int, height: int) -> None:
        with self._operation("resize", path) as handle:
            image, image_format = self._load(path, "resize")
            target = fit_within(image.size, (width, height))
            handle.add_metadata("size", f"{target[0]}x{target[1]}")
            resized = _filterable(image).resize(target, resample=self.resample)
            self._save(resized, path, image_format)

    def grayscale(self, path: str) -> None:
        with self._operation("grayscale", path):
            image, image_format = self._load(path, "grayscale")
            converted = image.convert("LA" if _has_alpha(image) else "L")
            self._save(converted, path, image_format)

    def blur(self, path: str, strength: float) -> None:
        with self._operation("blur", path) as handle:
            handle.add_metadata("strength", strength)
            image, image_format = self._load(path, "blur")
            blurred = _filterable(image).filter(ImageFilter.GaussianBlur(strength))
            self._save(blurred, path, image_format)

    @staticmethod
    def _load(path: str, operation: str) -> Tuple[Image.Image, Optional[str]]:
        with Image.open(path) as source:
            image_format = source.format
            if not _can_save(image_format):
                raise ImageOperationError(
                    f"Could not {operation} {path}: {image_format} files can be "
                    "read but not written",
                    path=path,
                    operation=operation,
                )
            source.load()
            return source.copy(), image_format

    @staticmethod
    def _save(image: Image.Image, path: str, image_format: Optional[str]) -> None:
        image.save(path, format=image_format)

    @contextmanager
    def _operation(self, operation: str, path: str) -> Iterator[telemetry.SpanHandle]:
        try:
            with telemetry.span(
                f"imaging::{operation}",
                logger_name=_LOGGER,
                component="imaging",
                metadata={"path": path},
            ) as handle:
                yield handle
        except (
            OSError,
            ValueError,
            SyntaxError,
            KeyError,
            Image.DecompressionBombError,
        ) as exc:
            raise ImageOperationError(
                f"Could not {operation} {path}: {exc}", path=path, operation=operation
            ) from exc
        telemetry.record_event(
            f"imaging.{operation}", data={"path": path}, logger_name=_LOGGER
        )


__all__ = ["PillowImageOperations", "fit_within"]
