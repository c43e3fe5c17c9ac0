"""Sequential and threaded matrix multiplication.

Parallel mode splits the rows of the left operand into contiguous ranges,
one per worker thread. Workers read both operands, build only their own
rows and put a single ``WorkerReport`` on a shared queue. The coordinator
joins every thread before draining exactly one report per non-empty range,
then stitches the rows back together in range order.
"""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from matrix_console.errors import (
    ComputeError,
    DimensionMismatch,
    EmptyInput,
    Overflow,
    WorkerFailed,
)
from matrix_console.runtime import telemetry

from .models import Matrix, Row, fits_int64

RowRange = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class WorkerReport:
    start: int
    end: int
    rows: Tuple[Row, ...] = ()
    error: Optional[BaseException] = None


def partition_rows(rows: int, workers: int) -> List[RowRange]:
    """Return ``workers`` contiguous ranges covering ``[0, rows)``.

    Ranges may be empty when there are more workers than rows.
    """

    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    return [((t * rows) // workers, ((t + 1) * rows) // workers) for t in range(workers)]


def check_operands(a: Matrix, b: Matrix) -> None:
    if a.is_empty():
        raise EmptyInput("left")
    if b.is_empty():
        raise EmptyInput("right")
    if a.column_count != b.row_count:
        raise DimensionMismatch(a.column_count, b.row_count)


def _compute_rows(a: Matrix, b: Matrix, start: int, end: int) -> Tuple[Row, ...]:
    inner = b.row_count
    columns = b.column_count
    rows: List[Row] = []
    for i in range(start, end):
        a_row = a[i]
        out: List[int] = []
        for j in range(columns):
            total = 0
            for k in range(inner):
                product = a_row[k] * b[k][j]
                if not fits_int64(product):
                    raise Overflow(i, j)
                total += product
                if not fits_int64(total):
                    raise Overflow(i, j)
            out.append(total)
        rows.append(tuple(out))
    return tuple(rows)


def multiply_sequential(a: Matrix, b: Matrix) -> Matrix:
    check_operands(a, b)
    return Matrix(_compute_rows(a, b, 0, a.row_count))


def _run_worker(
    a: Matrix,
    b: Matrix,
    start: int,
    end: int,
    reports: "queue.SimpleQueue[WorkerReport]",
) -> None:
    if start == end:
        return
    try:
        rows = _compute_rows(a, b, start, end)
    except Exception as exc:
        reports.put(WorkerReport(start=start, end=end, error=exc))
    else:
        reports.put(WorkerReport(start=start, end=end, rows=rows))


def _drain_reports(
    reports: "queue.SimpleQueue[WorkerReport]", expected: Sequence[RowRange]
) -> List[WorkerReport]:
    collected: dict[RowRange, WorkerReport] = {}
    for _ in expected:
        try:
            report = reports.get_nowait()
        except queue.Empty:
            break
        collected[(report.start, report.end)] = report

    missing = [rng for rng in expected if rng not in collected]
    if missing:
        start, end = missing[0]
        raise WorkerFailed(start, end, RuntimeError("worker exited without a report"))
    return [collected[rng] for rng in expected]


def multiply_parallel(a: Matrix, b: Matrix, workers: int) -> Matrix:
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    check_operands(a, b)

    ranges = partition_rows(a.row_count, workers)
    expected = [rng for rng in ranges if rng[0] != rng[1]]
    reports: "queue.SimpleQueue[WorkerReport]" = queue.SimpleQueue()
    threads = [
        threading.Thread(
            target=_run_worker,
            args=(a, b, start, end, reports),
            name=f"matrix-worker-{index}",
            daemon=True,
        )
        for index, (start, end) in enumerate(ranges)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ordered = _drain_reports(reports, expected)
    rows: List[Row] = []
    for report in ordered:
        if report.error is not None:
            if isinstance(report.error, ComputeError):
                raise report.error
            raise WorkerFailed(report.start, report.end, report.error) from report.error
        telemetry.record_event(
            "engine.worker_report",
            level="debug",
            data={"start": report.start, "end": report.end},
            logger_name="matrix_console.engine",
        )
        rows.extend(report.rows)
    return Matrix(tuple(rows))


def multiply(a: Matrix, b: Matrix, *, workers: Optional[int] = None) -> Matrix:
    """Multiply ``a`` by ``b``.

    ``workers=None`` runs sequentially; any ``workers >= 1`` uses that many
    threads. Both modes return identical matrices and raise the same
    ``ComputeError`` for the same operands.
    """

    mode = "sequential" if workers is None else f"parallel[{workers}]"
    with telemetry.span(
        "engine::multiply",
        logger_name="matrix_console.engine",
        component="engine",
        metadata={"mode": mode, "left": a.shape, "right": b.shape},
    ):
        if workers is None:
            return multiply_sequential(a, b)
        return multiply_parallel(a, b, workers)


__all__ = [
    "WorkerReport",
    "partition_rows",
    "check_operands",
    "multiply",
    "multiply_sequential",
    "multiply_parallel",
]
