"""Dataset protocols and simple in-memory implementations.

Label generators only read from datasets, through the accessors declared
by ``XYDataset`` / ``XYZDataset``. The default implementations store each
series as a ``(dimensions, n)`` float array, one row per axis.
"""

from __future__ import annotations

from typing import Any, ClassVar, Hashable, List, Protocol, Tuple

import numpy as np

from .errors import InvalidArgumentError, null_not_permitted

__all__ = [
    "XYDataset",
    "XYZDataset",
    "DefaultXYDataset",
    "DefaultXYZDataset",
]


class XYDataset(Protocol):  # pragma: no cover - structural only
    def series_count(self) -> int:
        ...

    def series_key(self, series: int) -> Hashable:
        ...

    def item_count(self, series: int) -> int:
        ...

    def x(self, series: int, item: int) -> Any:
        ...

    def y(self, series: int, item: int) -> Any:
        ...


class XYZDataset(XYDataset, Protocol):  # pragma: no cover - structural only
    def z(self, series: int, item: int) -> Any:
        ...


class DefaultXYDataset:
    """Ordered collection of keyed XY series backed by numpy arrays."""

    DIMENSIONS: ClassVar[Tuple[str, ...]] = ("x", "y")

    def __init__(self) -> None:
        self._keys: List[Hashable] = []
        self._data: List[np.ndarray] = []

    def add_series(self, key: Hashable, data: Any) -> None:
        """Add a series, replacing any existing series with the same key.

        ``data`` must be array-like with one row per dimension and equal
        length rows, e.g. ``[[x0, x1], [y0, y1]]`` for XY data.
        """
        null_not_permitted(key, "key")
        null_not_permitted(data, "data")
        try:
            arr = np.array(data, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Series data for {key!r} is not numeric or has ragged rows.",
                context={"key": key},
            ) from e
        dims = len(self.DIMENSIONS)
        if arr.ndim != 2 or arr.shape[0] != dims:
            raise InvalidArgumentError(
                f"Series data must have shape ({dims}, n), got {arr.shape}.",
                context={"key": key, "shape": arr.shape},
            )
        arr.setflags(write=False)
        idx = self.index_of(key)
        if idx >= 0:
            self._data[idx] = arr
        else:
            self._keys.append(key)
            self._data.append(arr)

    def remove_series(self, key: Hashable) -> None:
        idx = self.index_of(key)
        if idx < 0:
            raise KeyError(f"Unknown series: {key!r}")
        del self._keys[idx]
        del self._data[idx]

    def index_of(self, key: Hashable) -> int:
        try:
            return self._keys.index(key)
        except ValueError:
            return -1

    # XYDataset -----------------------------------------------------------
    def series_count(self) -> int:
        return len(self._keys)

    def series_key(self, series: int) -> Hashable:
        self._check_series(series)
        return self._keys[series]

    def item_count(self, series: int) -> int:
        self._check_series(series)
        return int(self._data[series].shape[1])

    def x(self, series: int, item: int) -> float:
        return self._value(series, 0, item)

    def y(self, series: int, item: int) -> float:
        return self._value(series, 1, item)

    # Internal ------------------------------------------------------------
    def _check_series(self, series: int) -> None:
        if not 0 <= series < len(self._keys):
            raise IndexError(f"Series index out of range: {series}")

    def _value(self, series: int, row: int, item: int) -> float:
        self._check_series(series)
        arr = self._data[series]
        if not 0 <= item < arr.shape[1]:
            raise IndexError(f"Item index out of range: {item}")
        return float(arr[row, item])


class DefaultXYZDataset(DefaultXYDataset):
    """``DefaultXYDataset`` with a third (z) row per series."""

    DIMENSIONS: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    def z(self, series: int, item: int) -> float:
        return self._value(series, 2, item)
