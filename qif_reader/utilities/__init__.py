from .config_logging import LOGGING, build_logging_config
from .converters_scalar import (
    DEFAULT_DATE_FORMAT,
    MDY_DATE_FORMAT,
    check_date_format,
    to_amount,
    to_date,
    to_strptime_format,
)
from .core_util import (
    iter_lines,
    open_for_read,
    strip_line_ending,
)

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "MDY_DATE_FORMAT",
    "check_date_format",
    "iter_lines",
    "open_for_read",
    "strip_line_ending",
    "to_amount",
    "to_date",
    "to_strptime_format",
    "build_logging_config",
    "LOGGING",
]
