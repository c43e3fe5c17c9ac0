"""Matrix model, buffer parser and multiplication engine."""

from .engine import (
    WorkerReport,
    multiply,
    multiply_parallel,
    multiply_sequential,
    partition_rows,
)
from .models import INT64_MAX, INT64_MIN, Matrix
from .parser import parse_matrix, render_buffer

__all__ = [
    "Matrix",
    "INT64_MIN",
    "INT64_MAX",
    "parse_matrix",
    "render_buffer",
    "WorkerReport",
    "multiply",
    "multiply_parallel",
    "multiply_sequential",
    "partition_rows",
]
