"""Template driven value formatting shared by the XY and XYZ generators.

A ``TemplatedValueFormatter`` pairs an ordered tuple of value formatters
with a positional ``str.format`` template. Slot ``{0}`` always receives the
item name; slots ``{1}`` .. ``{n}`` receive the formatted values in the
same order as the formatters. Every slot receives text, so format specs in
the template apply to strings (alignment and width, not precision).
"""

from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from typing import Any, Iterator, Sequence, Tuple
import logging

from ..datasets import XYDataset
from ..errors import InvalidArgumentError, null_not_permitted
from ..settings import DEFAULT_NULL_STRING
from .formatters import ValueFormatter, ensure_formatter

log = logging.getLogger(__name__)

__all__ = ["TemplatedValueFormatter", "format_item", "series_name"]


@dataclass(frozen=True)
class TemplatedValueFormatter:
    template: str
    formatters: Tuple[ValueFormatter, ...]
    null_string: str = DEFAULT_NULL_STRING

    def __post_init__(self) -> None:
        null_not_permitted(self.template, "template")
        if not isinstance(self.template, str):
            raise InvalidArgumentError(
                "Template must be a string.",
                context={"argument": "template", "type": type(self.template).__name__},
            )
        null_not_permitted(self.formatters, "formatters")
        formatters = tuple(self.formatters)
        for idx, formatter in enumerate(formatters):
            ensure_formatter(formatter, f"formatters[{idx}]")
        object.__setattr__(self, "formatters", formatters)
        null_not_permitted(self.null_string, "null_string")
        _check_template(self.template, len(formatters) + 1)

    @property
    def slot_count(self) -> int:
        return len(self.formatters) + 1

    def format_values(self, values: Sequence[Any]) -> Tuple[str, ...]:
        """Format ``values`` positionally; ``None`` becomes ``null_string``."""
        values = tuple(values)
        if len(values) != len(self.formatters):
            raise InvalidArgumentError(
                f"Expected {len(self.formatters)} values, got {len(values)}.",
                context={"expected": len(self.formatters), "actual": len(values)},
            )
        return tuple(
            self.null_string if value is None else formatter.format(value)
            for formatter, value in zip(self.formatters, values)
        )

    def substitute(self, items: Sequence[str]) -> str:
        return self.template.format(*items)

    def format(self, name: Any, values: Sequence[Any]) -> str:
        return self.substitute((str(name),) + self.format_values(values))


def series_name(dataset: XYDataset, series: int) -> str:
    return str(dataset.series_key(series))


def format_item(
    template: TemplatedValueFormatter,
    dataset: XYDataset,
    series: int,
    item: int,
    values: Sequence[Any],
) -> Tuple[str, ...]:
    """Format one dataset item into the substitution tuple for ``template``.

    Formatter failures are logged at DEBUG and re-raised unchanged.
    """
    name = series_name(dataset, series)
    try:
        formatted = template.format_values(values)
    except Exception:
        log.debug("Formatting item %s of series %r failed", item, name, exc_info=True)
        raise
    return (name,) + formatted


def _template_fields(template: str) -> Iterator[str]:
    # replacement fields may nest inside a format spec, e.g. "{1:>{2}}"
    for _lit, field_name, spec, _conv in Formatter().parse(template):
        if field_name is None:
            continue
        yield field_name
        if spec:
            yield from _template_fields(spec)


def _check_template(template: str, slot_count: int) -> None:
    try:
        fields = list(_template_fields(template))
    except ValueError as e:
        raise InvalidArgumentError(
            f"Malformed template: {e}", context={"template": template}
        ) from e
    for field_name in fields:
        # slots hold plain text, so attribute and index access are rejected too
        if not field_name.isdigit():
            raise InvalidArgumentError(
                f"Template field {{{field_name}}} is not a plain positional slot.",
                context={"template": template, "field": field_name},
            )
        if int(field_name) >= slot_count:
            raise InvalidArgumentError(
                f"Template field {{{field_name}}} exceeds the {slot_count} available slots.",
                context={"template": template, "field": field_name, "slots": slot_count},
            )
