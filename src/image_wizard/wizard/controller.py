"""Mode controller: turns a submitted line into the next wizard mode."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Literal, Optional

from image_wizard.errors import (
    ImageOperationError,
    InvalidSubmissionError,
    MissingTargetError,
    WizardError,
)
from image_wizard.imaging import ImageOperations
from image_wizard.runtime import telemetry

from .modes import WizardMode
from .parsing import parse_blur_strength, parse_dimensions, parse_menu_choice
from .state import WizardState

SubmissionStatus = Literal[
    "selected", "ignored", "picked", "applied", "rejected", "failed"
]


@dataclass(slots=True)
class SubmissionResult:
    """Outcome of one submission."""

    status: SubmissionStatus
    mode: WizardMode
    message: Optional[str] = None
    effect: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status not in {"rejected", "failed"}


Handler = Callable[[WizardState, str], SubmissionResult]


class ModeController:
    """Interprets submissions per ``WizardMode`` and runs image side effects.

    Wizard errors never escape :meth:`submit`. Parse errors keep the current
    mode so the user can retry; failures of the operation itself send the
    user back to the selection menu. Both leave an error status on the state.
    """

    def __init__(self, operations: ImageOperations) -> None:
        self.operations = operations
        self.logger = telemetry.get_logger("image_wizard.wizard")
        self._handlers: Dict[WizardMode, Handler] = {
            WizardMode.SELECT_MODE: self._select_mode,
            WizardMode.IMAGE_PICKER: self._pick_image,
            WizardMode.RESIZE: self._resize,
            WizardMode.GRAYSCALE: self._grayscale,
            WizardMode.BLUR: self._blur,
        }

    def submit(self, state: WizardState, text: str) -> SubmissionResult:
        state.message = text
        mode = state.mode
        with telemetry.span(
            f"wizard::{mode.value}",
            logger_name="image_wizard.wizard",
            component="wizard",
            metadata={"mode": mode.value},
        ) as handle:
            try:
                result = self._handlers[mode](state, text)
            except InvalidSubmissionError as exc:
                result = self._reject(state, mode, str(exc))
            except WizardError as exc:
                result = self._fail(state, mode, exc)
            handle.add_metadata("status", result.status)

        if result.mode is not mode:
            state.mode = result.mode
            telemetry.record_event(
                "wizard.transition",
                data={"from": mode.value, "to": result.mode.value},
                logger_name="image_wizard.wizard",
            )
        return result

    def _select_mode(self, state: WizardState, text: str) -> SubmissionResult:
        chosen = parse_menu_choice(text)
        if chosen is None:
            return SubmissionResult(status="ignored", mode=WizardMode.SELECT_MODE)
        return SubmissionResult(status="selected", mode=chosen)

    def _pick_image(self, state: WizardState, text: str) -> SubmissionResult:
        path = str(Path(text.strip()).expanduser())
        try:
            self.operations.open_and_validate(path)
        except ImageOperationError as exc:
            # Stay in the picker; the previous target is kept.
            return self._reject(state, WizardMode.IMAGE_PICKER, str(exc))
        state.to_edit_image = path
        return self._done(state, "picked", f"Selected {path}", effect="open")

    def _resize(self, state: WizardState, text: str) -> SubmissionResult:
        target = self._require_target(state, WizardMode.RESIZE)
        width, height = parse_dimensions(text)
        self.operations.resize(target, width, height)
        return self._done(
            state, "applied", f"Resized {target} to fit {width}x{height}", effect="resize"
        )

    def _grayscale(self, state: WizardState, text: str) -> SubmissionResult:
        del text
        target = self._require_target(state, WizardMode.GRAYSCALE)
        self.operations.grayscale(target)
        return self._done(state, "applied", f"Grayscaled {target}", effect="grayscale")

    def _blur(self, state: WizardState, text: str) -> SubmissionResult:
        target = self._require_target(state, WizardMode.BLUR)
        strength = parse_blur_strength(text)
        self.operations.blur(target, strength)
        return self._done(
            state, "applied", f"Blurred {target} with strength {strength:g}", effect="blur"
        )

    @staticmethod
    def _require_target(state: WizardState, mode: WizardMode) -> str:
        if not state.to_edit_image:
            raise MissingTargetError(mode.value)
        return state.to_edit_image

    @staticmethod
    def _done(
        state: WizardState,
        status: SubmissionStatus,
        message: str,
        *,
        effect: str,
    ) -> SubmissionResult:
        state.set_status(message)
        return SubmissionResult(
            status=status, mode=WizardMode.SELECT_MODE, message=message, effect=effect
        )

    def _reject(
        self, state: WizardState, mode: WizardMode, message: str
    ) -> SubmissionResult:
        state.set_status(message, level="error")
        telemetry.record_event(
            "wizard.rejected",
            data={"mode": mode.value, "reason": message},
            logger_name="image_wizard.wizard",
        )
        return SubmissionResult(status="rejected", mode=mode, message=message)

    def _fail(
        self, state: WizardState, mode: WizardMode, exc: WizardError
    ) -> SubmissionResult:
        message = str(exc)
        state.set_status(message, level="error")
        telemetry.record_event(
            "wizard.failed",
            level="error",
            data={"mode": mode.value, "error": type(exc).__name__, "reason": message},
            logger_name="image_wizard.wizard",
        )
        return SubmissionResult(
            status="failed", mode=WizardMode.SELECT_MODE, message=message
        )


__all__ = ["ModeController", "SubmissionResult", "SubmissionStatus"]
