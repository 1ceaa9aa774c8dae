"""Shared fixtures for the label generator tests."""

from __future__ import annotations

from typing import Any, Hashable, List, Sequence

import pytest

from charting import DefaultXYZDataset


class SparseXYZDataset:
    """Minimal XYZ dataset allowing ``None`` values (missing readings)."""

    def __init__(self, key: Hashable, rows: Sequence[Sequence[Any]]) -> None:
        self._key = key
        self._rows: List[Sequence[Any]] = list(rows)

    def series_count(self) -> int:
        return 1

    def series_key(self, series: int) -> Hashable:
        return self._key

    def item_count(self, series: int) -> int:
        return len(self._rows[0])

    def x(self, series: int, item: int) -> Any:
        return self._rows[0][item]

    def y(self, series: int, item: int) -> Any:
        return self._rows[1][item]

    def z(self, series: int, item: int) -> Any:
        return self._rows[2][item]


@pytest.fixture
def xyz_dataset() -> DefaultXYZDataset:
    ds = DefaultXYZDataset()
    ds.add_series("S1", [[1.5, 1000.0, 86_400_000], [2.5, -3.25, 0.0], [3.5, float("nan"), 12.0]])
    ds.add_series(7, [[0.0], [1.0], [2.0]])
    return ds


@pytest.fixture
def sparse_dataset() -> SparseXYZDataset:
    return SparseXYZDataset("Sensor A", [[1.0, 2.0], [None, 4.0], [5.0, None]])
