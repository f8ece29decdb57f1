"""conlog — leveled console logging for engine-hosted applications.

Timestamped, colour-marked log records routed to a host console, plus
a typed value wrapper for registration/lookup disambiguation.
"""

from conlog._version import __version__, __app_name__
from conlog.logger import (
    set_log_level, log_development, log_info, log_warning, log_error,
    init_logging, get_logger, Severity, trace,
)
from conlog.wrappers import ValueWrapper, unwrap

__all__ = [
    "__version__", "__app_name__",
    "set_log_level", "log_development", "log_info", "log_warning",
    "log_error", "init_logging", "get_logger", "Severity", "trace",
    "ValueWrapper", "unwrap",
]
