"""Status-line cursor location formatting for text editors."""

__all__ = [
    "adapters",
    "buffer",
    "display",
    "runtime",
    "selections",
    "settings",
]

__version__ = "0.1.0"
