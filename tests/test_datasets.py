"""Tests for the numpy backed in-memory datasets."""

from __future__ import annotations

import numpy as np
import pytest

from charting import DefaultXYDataset, DefaultXYZDataset, InvalidArgumentError


def test_add_and_read_series(xyz_dataset):
    assert xyz_dataset.series_count() == 2
    assert xyz_dataset.series_key(0) == "S1"
    assert xyz_dataset.item_count(0) == 3
    assert xyz_dataset.x(0, 1) == 1000.0
    assert xyz_dataset.y(0, 1) == -3.25
    assert np.isnan(xyz_dataset.z(0, 1))
    assert isinstance(xyz_dataset.x(0, 0), float)


def test_readding_key_replaces_data(xyz_dataset):
    xyz_dataset.add_series("S1", [[9.0], [8.0], [7.0]])
    assert xyz_dataset.series_count() == 2
    assert xyz_dataset.index_of("S1") == 0
    assert xyz_dataset.item_count(0) == 1
    assert xyz_dataset.z(0, 0) == 7.0


def test_remove_series(xyz_dataset):
    xyz_dataset.remove_series("S1")
    assert xyz_dataset.series_count() == 1
    assert xyz_dataset.index_of("S1") == -1
    assert xyz_dataset.series_key(0) == 7
    with pytest.raises(KeyError):
        xyz_dataset.remove_series("S1")


@pytest.mark.parametrize(
    "data",
    [
        [[1.0, 2.0], [3.0, 4.0]],  # only two rows
        [1.0, 2.0, 3.0],  # one dimensional
        [[1.0], [2.0, 3.0], [4.0]],  # ragged
        [["a"], ["b"], ["c"]],  # non numeric
    ],
)
def test_bad_series_data_rejected(data):
    with pytest.raises(InvalidArgumentError):
        DefaultXYZDataset().add_series("bad", data)


def test_null_key_rejected():
    with pytest.raises(InvalidArgumentError):
        DefaultXYDataset().add_series(None, [[1.0], [2.0]])


def test_out_of_range_indices(xyz_dataset):
    with pytest.raises(IndexError):
        xyz_dataset.x(5, 0)
    with pytest.raises(IndexError):
        xyz_dataset.y(0, 3)
    with pytest.raises(IndexError):
        xyz_dataset.z(0, -1)


def test_stored_arrays_are_independent_copies():
    source = np.array([[1.0], [2.0]])
    ds = DefaultXYDataset()
    ds.add_series("A", source)
    source[0, 0] = 99.0
    assert ds.x(0, 0) == 1.0


def test_xy_dataset_has_no_z():
    assert not hasattr(DefaultXYDataset(), "z")
