"""Append-only text buffer holding one matrix as typed by the user."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, List, Optional

from matrix_console.runtime import telemetry

from .policy import DEFAULT_POLICY, SeparatorPolicy


@dataclass(slots=True)
class BufferView:
    index: int
    version: int
    text: str
    display: str


class TextBuffer:
    """Characters of one matrix, edited only at the end.

    ``version`` increases on every effective change so views can tell stale
    snapshots apart.
    """

    def __init__(
        self,
        *,
        index: int,
        text: str = "",
        policy: SeparatorPolicy = DEFAULT_POLICY,
    ) -> None:
        self.index = index
        self.policy = policy
        self._chars: List[str] = list(text)
        self.version = 0

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def snapshot(self) -> BufferView:
        text = self.text
        return BufferView(
            index=self.index,
            version=self.version,
            text=text,
            display=self.policy.display(text),
        )

    def append(self, chars: str) -> None:
        if not chars:
            return
        with Transaction(self, "append"):
            self._chars.extend(chars)
            self.version += 1

    def pop(self) -> Optional[str]:
        """Remove and return the last character, or ``None`` when empty."""

        if not self._chars:
            return None
        with Transaction(self, "pop"):
            char = self._chars.pop()
            self.version += 1
        return char


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.index},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
