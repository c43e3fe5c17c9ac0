"""Text buffers holding the matrices being typed."""

from .buffer import BufferView, TextBuffer, Transaction
from .policy import DEFAULT_POLICY, SeparatorPolicy
from .store import BUFFER_COUNT, BufferStore

__all__ = [
    "BufferView",
    "TextBuffer",
    "Transaction",
    "SeparatorPolicy",
    "DEFAULT_POLICY",
    "BufferStore",
    "BUFFER_COUNT",
]
