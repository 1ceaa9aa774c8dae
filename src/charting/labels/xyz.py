"""Standard tooltip / item label generator for XYZ datasets.

Each of the x, y and z values is formatted by its own axis formatter,
either numeric or date based, and substituted into a positional template
together with the series name. The default template is
``"{0}: ({1}, {2}, {3})"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Tuple
import logging

from ..datasets import XYZDataset
from ..errors import InvalidArgumentError, null_not_permitted
from ..settings import DEFAULT_NULL_STRING, DEFAULT_XYZ_TOOL_TIP_FORMAT
from .formatters import NumberFormatter, ValueFormatter, ensure_formatter
from .templated import TemplatedValueFormatter, format_item

log = logging.getLogger(__name__)

__all__ = ["StandardXYZToolTipGenerator"]


@dataclass(frozen=True)
class StandardXYZToolTipGenerator:
    """Tooltip generator for ``(series name, x, y, z)`` items.

    Attributes:
        format_string: Positional template with slots ``{0}`` (series name)
            through ``{3}`` (z).
        x_format: Formatter for x values (``NumberFormatter`` or ``DateFormatter``).
        y_format: Formatter for y values.
        z_format: Formatter for z values.
        null_string: Text used when the dataset reports a missing value.

    Instances are immutable and compare by value, so two generators with
    the same template and formatter settings are equal and hash alike.
    """

    DEFAULT_TOOL_TIP_FORMAT: ClassVar[str] = DEFAULT_XYZ_TOOL_TIP_FORMAT

    format_string: str = DEFAULT_XYZ_TOOL_TIP_FORMAT
    x_format: ValueFormatter = field(default_factory=NumberFormatter)
    y_format: ValueFormatter = field(default_factory=NumberFormatter)
    z_format: ValueFormatter = field(default_factory=NumberFormatter)
    null_string: str = DEFAULT_NULL_STRING
    _template: TemplatedValueFormatter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        null_not_permitted(self.format_string, "format_string")
        ensure_formatter(self.x_format, "x_format")
        ensure_formatter(self.y_format, "y_format")
        ensure_formatter(self.z_format, "z_format")
        template = TemplatedValueFormatter(
            self.format_string,
            (self.x_format, self.y_format, self.z_format),
            self.null_string,
        )
        object.__setattr__(self, "_template", template)
        log.debug("Created %s with template %r", type(self).__name__, self.format_string)

    def item_values(self, dataset: XYZDataset, series: int, item: int) -> Tuple[str, ...]:
        """Return the substitution tuple ``(name, x_text, y_text, z_text)``."""
        null_not_permitted(dataset, "dataset")
        if not callable(getattr(dataset, "z", None)):
            raise InvalidArgumentError(
                "Dataset does not provide z values.",
                context={"argument": "dataset", "type": type(dataset).__name__},
            )
        values = (
            dataset.x(series, item),
            dataset.y(series, item),
            dataset.z(series, item),
        )
        return format_item(self._template, dataset, series, item, values)

    def generate(self, dataset: XYZDataset, series: int, item: int) -> str:
        """Build the tooltip text for ``item`` of ``series``.

        Raises:
            InvalidArgumentError: ``dataset`` is ``None`` or lacks z values.
        """
        return self._template.substitute(self.item_values(dataset, series, item))

    def generate_tool_tip(self, dataset: XYZDataset, series: int, item: int) -> str:
        return self.generate(dataset, series, item)

    def generate_label(self, dataset: XYZDataset, series: int, item: int) -> str:
        return self.generate(dataset, series, item)
