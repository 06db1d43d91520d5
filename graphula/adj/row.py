"""
Fixed-length row of integer edge weights.

A Row holds the outgoing edge weights of a single source node. Its
length is set at construction and never changes.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator, Sequence

import numpy as np

from graphula.config import DEFAULT_FILLER, WEIGHT_DTYPE


def check_index(index: int, size: int) -> int:
    """
    Validate a position against a container of the given size.

    Negative positions are rejected rather than counted from the end.

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexError: If index is outside [0, size)
    """
    if isinstance(index, bool):
        raise TypeError(f"Index must be an integer, not {type(index).__name__}")
    idx = operator.index(index)
    if idx < 0 or idx >= size:
        raise IndexError(f"Index {idx} out of range [0, {size})")
    return idx


def _to_weight(value: int) -> int:
    """Convert a value to the storage dtype, refusing to wrap."""
    info = np.iinfo(WEIGHT_DTYPE)
    weight = operator.index(value)
    if weight < info.min or weight > info.max:
        raise OverflowError(
            f"Weight {weight} does not fit in {WEIGHT_DTYPE} "
            f"[{info.min}, {info.max}]"
        )
    return weight


class Row:
    """
    Ordered, fixed-length sequence of signed integer weights.

    Attributes:
        size: Number of slots (equal to the node count of the owning matrix)
    """

    __slots__ = ("_data",)

    def __init__(self, size: int, filler: int = DEFAULT_FILLER) -> None:
        """
        Create a row with every slot set to filler.

        Args:
            size: Number of slots, 0 gives an empty row
            filler: Initial weight for every slot

        Raises:
            ValueError: If size is negative
        """
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"Row size must be non-negative, got {size}")
        self._data = np.full(size, _to_weight(filler), dtype=WEIGHT_DTYPE)

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return int(self._data[check_index(index, len(self._data))])

    def __setitem__(self, index: int, value: int) -> None:
        self._data[check_index(index, len(self._data))] = _to_weight(value)

    def __iter__(self) -> Iterator[int]:
        return (int(weight) for weight in self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return np.array_equal(self._data, other._data)
        if isinstance(other, Sequence) and not isinstance(other, str):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None

    def to_list(self) -> list[int]:
        """Return the weights as a list of Python ints."""
        return self._data.tolist()

    def to_array(self) -> np.ndarray:
        """Return a copy of the weights as a numpy array."""
        return self._data.copy()

    def copy(self) -> Row:
        """Return an independent row with the same weights."""
        clone = Row(0)
        clone._data = self._data.copy()
        return clone

    def __str__(self) -> str:
        return " ".join(str(weight) for weight in self._data.tolist()).rstrip()

    def __repr__(self) -> str:
        return f"Row({self.to_list()!r})"
