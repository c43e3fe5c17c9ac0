"""Interactive console for typing and multiplying integer matrices."""

__all__ = [
    "adapters",
    "buffer",
    "editor",
    "errors",
    "matrix",
    "runtime",
]

__version__ = "0.1.0"
