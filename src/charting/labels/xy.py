"""Standard tooltip / item label generator for XY datasets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Tuple
import logging

from ..datasets import XYDataset
from ..errors import null_not_permitted
from ..settings import DEFAULT_NULL_STRING, DEFAULT_XY_TOOL_TIP_FORMAT
from .formatters import NumberFormatter, ValueFormatter, ensure_formatter
from .templated import TemplatedValueFormatter, format_item

log = logging.getLogger(__name__)

__all__ = ["StandardXYToolTipGenerator"]


@dataclass(frozen=True)
class StandardXYToolTipGenerator:
    """Formats ``(series name, x, y)`` through ``format_string``.

    Example:
        gen = StandardXYToolTipGenerator("{0}: {1} -> {2}")
        gen.generate(dataset, 0, 3)  # 'Sales: 3 -> 1,250.5'
    """

    DEFAULT_TOOL_TIP_FORMAT: ClassVar[str] = DEFAULT_XY_TOOL_TIP_FORMAT

    format_string: str = DEFAULT_XY_TOOL_TIP_FORMAT
    x_format: ValueFormatter = field(default_factory=NumberFormatter)
    y_format: ValueFormatter = field(default_factory=NumberFormatter)
    null_string: str = DEFAULT_NULL_STRING
    _template: TemplatedValueFormatter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        null_not_permitted(self.format_string, "format_string")
        ensure_formatter(self.x_format, "x_format")
        ensure_formatter(self.y_format, "y_format")
        template = TemplatedValueFormatter(
            self.format_string, (self.x_format, self.y_format), self.null_string
        )
        object.__setattr__(self, "_template", template)
        log.debug("Created %s with template %r", type(self).__name__, self.format_string)

    def item_values(self, dataset: XYDataset, series: int, item: int) -> Tuple[str, ...]:
        """Return the substitution tuple ``(name, x_text, y_text)``."""
        null_not_permitted(dataset, "dataset")
        values = (dataset.x(series, item), dataset.y(series, item))
        return format_item(self._template, dataset, series, item, values)

    def generate(self, dataset: XYDataset, series: int, item: int) -> str:
        return self._template.substitute(self.item_values(dataset, series, item))

    def generate_tool_tip(self, dataset: XYDataset, series: int, item: int) -> str:
        return self.generate(dataset, series, item)

    def generate_label(self, dataset: XYDataset, series: int, item: int) -> str:
        return self.generate(dataset, series, item)
