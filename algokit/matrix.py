"""Algorithms over rectangular matrices stored as lists of rows."""

from __future__ import annotations


def spiral_order(matrix: list[list[int]]) -> list[int]:
    """Return the values of matrix read clockwise from the top-left corner."""
    if not matrix:
        raise ValueError("matrix must have at least one row")
    rows = [list(row) for row in matrix]
    order: list[int] = []
    while rows and rows[0]:
        order.extend(rows.pop(0))
        # Turn what is left a quarter anticlockwise so the next edge is on top.
        rows = [list(column) for column in zip(*rows)][::-1]
    return order


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    if not matrix:
        return
    zeros = [
        (r, c)
        for r, row in enumerate(matrix)
        for c, value in enumerate(row)
        if value == 0
    ]
    width = len(matrix[0])
    for r, c in zeros:
        for row in matrix:
            row[c] = 0
        matrix[r][:width] = [0] * width