"""Textual application hosting the image wizard."""

from __future__ import annotations

from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from image_wizard.runtime.loop import EventLoop, create_default_loop
from image_wizard.runtime import telemetry
from image_wizard.wizard.state import WizardState

from .controller import TextualUIHooks, TextualWizardAdapter
from .view import build_frame


class ImageWizardApp(App[None], inherit_bindings=False):
    """Help line, input box, and messages list; ``q`` in Normal quits.

    Bindings are not inherited so that every key, ``ctrl+q`` included,
    reaches the wizard's own keymaps.
    """

    CSS = """
	Screen {
		layout: vertical;
	}

	#help-line {
		height: 1;
		padding: 0 1;
	}

	#input-box {
		height: 3;
		border: round $accent;
		padding: 0 1;
	}

	#messages {
		height: 1fr;
		border: round $primary;
		padding: 0 1;
		overflow: auto;
	}
	"""

    def __init__(self, *, loop: Optional[EventLoop] = None) -> None:
        super().__init__()
        self.wizard_loop = loop or create_default_loop()
        self.adapter: TextualWizardAdapter | None = None
        self._help_widget: Static | None = None
        self._input_widget: Static | None = None
        self._messages_widget: Static | None = None
        self._trace = telemetry.get_logger("image_wizard.textual")

    def compose(self) -> ComposeResult:
        self._help_widget = Static("", id="help-line")
        self._input_widget = Static("", id="input-box")
        self._messages_widget = Static("", id="messages")
        yield self._help_widget
        yield self._input_widget
        yield self._messages_widget

    def on_mount(self) -> None:
        if self._input_widget:
            self._input_widget.border_title = "Input"
        if self._messages_widget:
            self._messages_widget.border_title = "Messages"
        hooks = TextualUIHooks(
            render=self._render_state,
            request_exit=self._request_exit,
            log=self._trace.debug,
        )
        self.adapter = TextualWizardAdapter(self.wizard_loop, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        event.stop()
        self.adapter.handle_textual_key(event.key, character=event.character)

    def _render_state(self, state: WizardState) -> None:
        frame = build_frame(state)
        if self._help_widget:
            self._help_widget.update(frame.help_line)
        if self._input_widget:
            self._input_widget.update(frame.input_line)
        if self._messages_widget:
            self._messages_widget.update(frame.messages)

    def _request_exit(self, return_code: int) -> None:
        self.exit(return_code=return_code)


__all__ = ["ImageWizardApp"]
