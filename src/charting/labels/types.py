"""Structural protocols for label and tooltip generators."""

from __future__ import annotations

from typing import Protocol

from ..datasets import XYDataset, XYZDataset


class XYItemLabelGenerator(Protocol):  # pragma: no cover - structural only
    """Produces the text drawn next to an item of an XY dataset."""

    def generate_label(self, dataset: XYDataset, series: int, item: int) -> str:
        ...


class XYToolTipGenerator(Protocol):  # pragma: no cover - structural only
    """Produces hover text for an item of an XY dataset."""

    def generate_tool_tip(self, dataset: XYDataset, series: int, item: int) -> str:
        ...


class XYZToolTipGenerator(Protocol):  # pragma: no cover - structural only
    """Produces hover text for an item of an XYZ dataset."""

    def generate_tool_tip(self, dataset: XYZDataset, series: int, item: int) -> str:
        ...
