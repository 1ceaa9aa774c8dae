"""Charting label layer.

Turns individual dataset items into display text (tooltips and item
labels) without depending on a plotting backend, so view code can ask for
hover text and tests can run headless.
"""

from .datasets import DefaultXYDataset, DefaultXYZDataset, XYDataset, XYZDataset  # noqa: F401
from .errors import ChartingError, InvalidArgumentError  # noqa: F401
from .labels import (  # noqa: F401
    DateFormatter,
    NumberFormatter,
    StandardXYToolTipGenerator,
    StandardXYZToolTipGenerator,
    TemplatedValueFormatter,
)
