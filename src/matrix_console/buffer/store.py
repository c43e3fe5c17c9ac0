"""The pair of matrix buffers edited by the console."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from .buffer import BufferView, TextBuffer
from .policy import DEFAULT_POLICY, SeparatorPolicy

BUFFER_COUNT = 2


class BufferStore:
    """Owns exactly two independent ``TextBuffer`` instances (0 and 1)."""

    def __init__(
        self,
        texts: Sequence[str] = ("", ""),
        *,
        policy: SeparatorPolicy = DEFAULT_POLICY,
    ) -> None:
        if len(texts) != BUFFER_COUNT:
            raise ValueError(f"expected {BUFFER_COUNT} buffer texts, got {len(texts)}")
        self.policy = policy
        self._buffers: Tuple[TextBuffer, ...] = tuple(
            TextBuffer(index=index, text=text, policy=policy)
            for index, text in enumerate(texts)
        )

    def __getitem__(self, index: int) -> TextBuffer:
        if index not in range(BUFFER_COUNT):
            raise IndexError(f"buffer index must be 0 or 1, got {index}")
        return self._buffers[index]

    def __iter__(self) -> Iterator[TextBuffer]:
        return iter(self._buffers)

    def __len__(self) -> int:
        return BUFFER_COUNT

    def texts(self) -> Tuple[str, ...]:
        return tuple(buffer.text for buffer in self._buffers)

    def snapshot(self) -> Tuple[BufferView, ...]:
        return tuple(buffer.snapshot() for buffer in self._buffers)


__all__ = ["BufferStore", "BUFFER_COUNT"]
