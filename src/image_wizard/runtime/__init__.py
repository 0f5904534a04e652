"""Event loop and telemetry plumbing."""
