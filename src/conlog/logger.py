"""Process-wide logging entry points for conlog.

Importing this module creates the module-level ConsoleLogger, which
announces its initial threshold on the console. Settings come from the
layered config (see conlog.config) and are read once, at import.

With enable_logging off, log_development/log_info/log_warning/log_error
are bound to a no-op: a call does no gate check, no source naming and
no formatting. set_log_level keeps working either way.

Also re-exports the log_lib public API for convenience imports.
"""

from conlog.config import load_settings
from conlog.lib.log_lib import manager as _manager_mod

# Re-export log_lib public API — one-stop import for host code
from conlog.lib.log_lib import (                     # noqa: F401
    ConsoleLogger, init_logging, get_logger,
    Severity, ConsoleSink, StreamSink, RecordingSink,
    trace,
)


_settings = load_settings(strict=False)

ENABLE_LOGGING = _settings.enable_logging

if _manager_mod._logger is None:
    init_logging(level=_settings.log_level)

for _problem in _settings.problems:
    get_logger().error("conlog.config", _problem)


def set_log_level(level):
    """Change the process-wide threshold and announce it at Info."""
    get_logger().set_log_level(level)


def _log_development(source, message):
    get_logger().log(Severity.DEVELOPMENT, source, message)


def _log_info(source, message):
    get_logger().log(Severity.INFO, source, message)


def _log_warning(source, message):
    get_logger().log(Severity.WARNING, source, message)


def _log_error(source, message):
    get_logger().log(Severity.ERROR, source, message)


def _disabled(source, message):
    """Stand-in for every log_* entry point when logging is off."""


def build_entry_points(enabled):
    """Return (log_development, log_info, log_warning, log_error).

    Args:
        enabled: False binds all four to a no-op

    Returns:
        Tuple of four callables taking (source, message)
    """
    if not enabled:
        return _disabled, _disabled, _disabled, _disabled
    return _log_development, _log_info, _log_warning, _log_error


log_development, log_info, log_warning, log_error = \
    build_entry_points(ENABLE_LOGGING)
