from .config_logging import LOGGING, configure_logging
from .core_util import is_null_or_whitespace, open_for_read

__all__ = [
    "is_null_or_whitespace",
    "open_for_read",
    "LOGGING",
    "configure_logging",
]
