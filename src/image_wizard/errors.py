"""Recoverable wizard errors surfaced to the user as status lines."""

from __future__ import annotations


class WizardError(RuntimeError):
    """Base class for errors the mode controller turns into status messages."""


class InvalidSubmissionError(WizardError, ValueError):
    """Raised when submitted text cannot be parsed for the active mode."""

    def __init__(self, message: str, *, text: str) -> None:
        super().__init__(message)
        self.text = text


class MissingTargetError(WizardError):
    """Raised when an image operation runs before an image was picked."""

    def __init__(self, mode: str) -> None:
        super().__init__("No image selected. Choose 1 to pick an image first.")
        self.mode = mode


class ImageOperationError(WizardError):
    """Raised when opening, transforming, or saving an image fails."""

    def __init__(self, message: str, *, path: str, operation: str) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation


__all__ = [
    "WizardError",
    "InvalidSubmissionError",
    "MissingTargetError",
    "ImageOperationError",
]
