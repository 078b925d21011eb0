"""Traversals and transformations of row-major integer matrices."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

Matrix = Sequence[Sequence[int]]


class SparseEntry(NamedTuple):
    """One stored element of a sparse matrix."""

    row: int
    column: int
    value: int


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("all rows must have the same length")
    return rows, cols


def diagonal_order(matrix: Matrix) -> list[int]:
    """Return the elements in zig-zag diagonal order, starting upwards at (0, 0)."""
    rows, cols = _shape(matrix)
    order: list[int] = []
    for d in range(rows + cols - 1):
        first_row = max(0, d - cols + 1)
        last_row = min(rows - 1, d)
        row_range = range(first_row, last_row + 1)
        if d % 2 == 0:
            row_range = reversed(row_range)
        order.extend(matrix[i][d - i] for i in row_range)
    return order


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements clockwise from the top-left corner, spiralling inwards."""
    bottom, right = _shape(matrix)
    top = left = 0
    order: list[int] = []
    while top < bottom and left < right:
        order.extend(matrix[top][left:right])
        top += 1
        order.extend(matrix[i][right - 1] for i in range(top, bottom))
        right -= 1
        if top < bottom:
            order.extend(matrix[bottom - 1][i] for i in range(right - 1, left - 1, -1))
            bottom -= 1
        if left < right:
            order.extend(matrix[i][left] for i in range(bottom - 1, top - 1, -1))
            left += 1
    return order


def to_sparse(matrix: Matrix) -> list[SparseEntry]:
    """Return the positive elements as (row, column, value) triples in row order."""
    _shape(matrix)
    return [
        SparseEntry(i, j, value)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value > 0
    ]


def lower_triangular(matrix: Matrix) -> list[list[int]]:
    """Return a copy with every element above the main diagonal set to zero."""
    _shape(matrix)
    return [
        [0 if i < j else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def upper_triangular(matrix: Matrix) -> list[list[int]]:
    """Return a copy with every element below the main diagonal set to zero."""
    _shape(matrix)
    return [
        [0 if i > j else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def format_matrix(matrix: Matrix) -> str:
    """Render the matrix one row per line, elements separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)