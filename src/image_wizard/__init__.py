"""Interactive terminal wizard for in-place image edits."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "imaging",
    "interaction",
    "keymaps",
    "runtime",
    "wizard",
    "errors",
]

__version__ = "0.1.0"
