"""Turn buffer text into a ``Matrix``."""

from __future__ import annotations

import re
from typing import List

from matrix_console.buffer import DEFAULT_POLICY, SeparatorPolicy
from matrix_console.errors import EmptyMatrix, InvalidCell, RaggedMatrix
from matrix_console.runtime.telemetry import span

from .models import Matrix, fits_int64

_CELL_PATTERN = re.compile(r"[+-]?[0-9]+")


def split_rows(text: str, policy: SeparatorPolicy = DEFAULT_POLICY) -> List[List[str]]:
    """Split ``text`` into rows of raw cell strings.

    Exactly one trailing empty row is dropped so a final row separator is
    tolerated. An empty row string yields an empty cell list.
    """

    rows = text.split(policy.row)
    if rows and rows[-1] == "":
        rows.pop()
    return [row.split(policy.cell) if row else [] for row in rows]


def parse_cell(raw: str, row: int, col: int) -> int:
    if not _CELL_PATTERN.fullmatch(raw):
        raise InvalidCell(row, col, raw)
    value = int(raw)
    if not fits_int64(value):
        raise InvalidCell(row, col, raw)
    return value


def parse_matrix(text: str, *, policy: SeparatorPolicy = DEFAULT_POLICY) -> Matrix:
    """Parse a buffer into a matrix.

    Structure is validated before cell contents: an empty buffer or empty
    row raises ``EmptyMatrix``, differing cell counts raise ``RaggedMatrix``,
    and only then is each cell checked, raising ``InvalidCell`` for the first
    bad one in row-major order.
    """

    with span(
        "matrix::parse",
        component="parser",
        metadata={"length": len(text)},
    ) as handle:
        rows = split_rows(text, policy)
        if not rows:
            raise EmptyMatrix()

        width = len(rows[0])
        for index, cells in enumerate(rows):
            if not cells:
                raise EmptyMatrix(index)
            if len(cells) != width:
                raise RaggedMatrix(index, width, len(cells))

        parsed = [
            [parse_cell(raw, row, col) for col, raw in enumerate(cells)]
            for row, cells in enumerate(rows)
        ]
        handle.add_metadata("shape", (len(parsed), width))
        return Matrix.from_rows(parsed)


def render_buffer(matrix: Matrix, *, policy: SeparatorPolicy = DEFAULT_POLICY) -> str:
    """Canonical buffer text for ``matrix``; ``parse_matrix`` inverts it."""

    return policy.row.join(
        policy.cell.join(str(value) for value in row) for row in matrix
    )


__all__ = ["parse_matrix", "render_buffer", "split_rows", "parse_cell"]
