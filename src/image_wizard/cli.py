"""Console entry point for the image wizard."""

from __future__ import annotations

import argparse
import dataclasses
from typing import Optional, Sequence

from image_wizard.runtime import telemetry


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="image-wizard",
        description=(
            "Interactive terminal wizard that resizes, grayscales, or blurs an "
            "image in place. Press e to type, Enter to submit, Esc to stop "
            "typing, q to quit."
        ),
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to this file (default: $IMAGE_WIZARD_LOG_FILE, else none)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=telemetry.LOG_LEVELS,
        help="Minimum log level (default: $IMAGE_WIZARD_LOG_LEVEL, else INFO)",
    )
    return parser.parse_args(argv)


def log_settings(args: argparse.Namespace) -> telemetry.LogSettings:
    settings = telemetry.LogSettings.from_env()
    overrides = {
        "log_file": args.log_file,
        "level": args.log_level,
    }
    return dataclasses.replace(
        settings, **{key: value for key, value in overrides.items() if value}
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(log_settings(args))
    from image_wizard.adapters.textual.app import ImageWizardApp

    app = ImageWizardApp()
    app.run()
    return app.return_code or 0


__all__ = ["main", "log_settings"]
