"""
Text rendering of adjacency matrices for debugging.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphula.config import EMPTY_MATRIX_TEXT

if TYPE_CHECKING:
    from graphula.adj.matrix import Matrix


def to_text(matrix: Matrix) -> str:
    """
    Render one line per row, each line newline-terminated.

    Returns EMPTY_MATRIX_TEXT when the matrix has no nodes.
    """
    if len(matrix) == 0:
        return EMPTY_MATRIX_TEXT
    return "".join(f"{row}\n" for row in matrix)
