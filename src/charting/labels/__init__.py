"""Item label and tooltip generators.

Generators compose a positional template with one value formatter per
axis (see ``templated.TemplatedValueFormatter``); the XY and XYZ variants
are siblings that differ only in the number of axes they read.
"""

from .formatters import DateFormatter, NumberFormatter, ValueFormatter, is_date_formatter  # noqa: F401
from .templated import TemplatedValueFormatter  # noqa: F401
from .types import XYItemLabelGenerator, XYToolTipGenerator, XYZToolTipGenerator  # noqa: F401
from .xy import StandardXYToolTipGenerator  # noqa: F401
from .xyz import StandardXYZToolTipGenerator  # noqa: F401
