"""Exception taxonomy shared by the parser, engine and editor."""

from __future__ import annotations

from typing import Optional


class MatrixConsoleError(Exception):
    """Base class for every error raised by matrix_console."""


class ParseError(MatrixConsoleError):
    """A text buffer could not be turned into a matrix."""

    def __init__(self, message: str, *, buffer_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.buffer_index = buffer_index

    def describe(self) -> str:
        if self.buffer_index is None:
            return str(self)
        return f"matrix {self.buffer_index}: {self}"


class InvalidCell(ParseError):
    def __init__(self, row: int, col: int, text: str) -> None:
        super().__init__(f"invalid cell {text!r} at row {row}, column {col}")
        self.row = row
        self.col = col
        self.text = text


class RaggedMatrix(ParseError):
    def __init__(self, row: int, expected: int, found: int) -> None:
        super().__init__(
            f"row {row} has {found} cells, expected {expected} like row 0"
        )
        self.row = row
        self.expected = expected
        self.found = found


class EmptyMatrix(ParseError):
    def __init__(self, row: Optional[int] = None) -> None:
        if row is None:
            message = "matrix has no rows"
        else:
            message = f"row {row} has no cells"
        super().__init__(message)
        self.row = row


class ComputeError(MatrixConsoleError):
    """Multiplication could not produce a product."""


class DimensionMismatch(ComputeError):
    def __init__(self, a_cols: int, b_rows: int) -> None:
        super().__init__(
            f"cannot multiply: left matrix has {a_cols} columns "
            f"but right matrix has {b_rows} rows"
        )
        self.a_cols = a_cols
        self.b_rows = b_rows


class Overflow(ComputeError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"64-bit overflow computing cell ({row}, {col})")
        self.row = row
        self.col = col


class EmptyInput(ComputeError):
    def __init__(self, operand: str) -> None:
        super().__init__(f"{operand} matrix is empty")
        self.operand = operand


class WorkerFailed(ComputeError):
    """A multiplication worker raised instead of reporting its rows."""

    def __init__(self, start: int, end: int, cause: BaseException) -> None:
        super().__init__(f"worker for rows [{start}, {end}) failed: {cause!r}")
        self.start = start
        self.end = end
        self.cause = cause


class EditorClosedError(MatrixConsoleError):
    """Raised when an event reaches an editor that has already quit."""


class ConfigError(MatrixConsoleError, ValueError):
    """Invalid runtime configuration value."""


__all__ = [
    "MatrixConsoleError",
    "ParseError",
    "InvalidCell",
    "RaggedMatrix",
    "EmptyMatrix",
    "ComputeError",
    "DimensionMismatch",
    "Overflow",
    "EmptyInput",
    "WorkerFailed",
    "EditorClosedError",
    "ConfigError",
]
