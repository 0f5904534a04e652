"""Image operations invoked by the wizard on the picked file."""

from .base import ImageOperations
from .pillow_ops import PillowImageOperations, fit_within

__all__ = ["ImageOperations", "PillowImageOperations", "fit_within"]
