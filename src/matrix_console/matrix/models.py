"""Immutable integer matrix type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Row = Tuple[int, ...]


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


@dataclass(frozen=True, slots=True)
class Matrix:
    """Rectangular grid of signed 64-bit integers.

    Ragged rows are rejected at construction. Zero rows or zero columns are
    representable so that callers can report them as a domain error instead
    of a ``ValueError``.
    """

    rows: Tuple[Row, ...] = ()

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.rows)
        if rows:
            width = len(rows[0])
            for index, row in enumerate(rows):
                if len(row) != width:
                    raise ValueError(
                        f"ragged matrix: row {index} has {len(row)} cells, expected {width}"
                    )
                for value in row:
                    if isinstance(value, bool) or not isinstance(value, int):
                        raise TypeError(f"matrix cells must be int, got {value!r}")
                    if not fits_int64(value):
                        raise ValueError(f"{value} does not fit a signed 64-bit integer")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "Matrix":
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        return cls.from_rows(
            [1 if i == j else 0 for j in range(size)] for i in range(size)
        )

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.row_count, self.column_count)

    def is_empty(self) -> bool:
        return self.row_count == 0 or self.column_count == 0

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def to_lists(self) -> List[List[int]]:
        return [list(row) for row in self.rows]

    def render(self) -> str:
        """Whitespace-separated cells, newline-separated rows."""

        return "\n".join(" ".join(str(value) for value in row) for row in self.rows)


__all__ = ["Matrix", "Row", "INT64_MIN", "INT64_MAX", "fits_int64"]
