"""
ConsoleLogger — the leveled logging facade core.

Every log call goes through the same pipeline:

    gate check → context handle → source label → format → channel dispatch

A call below the threshold stops at the gate: no label is derived, no
string is built and the sink is never touched.

Levels outside Development..Error are not rejected. They pass the gate
and the formatter (colour falls back to white) and are then reported on
the error channel, wrapped in an "unknown level" notice.
"""

from datetime import datetime
from typing import Any, Callable, Optional

from .channels import Channel, channel_for_level
from .formatter import format_message
from .gate import LevelGate
from .levels import DEFAULT_LEVEL, Severity, level_name, parse_level
from .naming import source_name
from .sinks import ConsoleSink, StreamSink


class ConsoleLogger:
    """Leveled logger writing coloured records to a host console.

    Announces its threshold on the info channel when created and every
    time the threshold changes. Announcements pass through the gate, so
    raising the threshold above Info silences the announcement of that
    change.

    Usage::

        log = ConsoleLogger(sink=RecordingSink())
        log.info(self, "Loaded {0} items".format(42))
        log.set_log_level(Severity.WARNING)
        log.error("Inventory", "slot table corrupted")
    """

    def __init__(
        self,
        sink: ConsoleSink = None,
        level: int = DEFAULT_LEVEL,
        clock: Callable[[], datetime] = None,
        announce: bool = True,
    ):
        self.sink = sink if sink is not None else StreamSink()
        self.gate = LevelGate(level)
        self.clock = clock
        if announce:
            self._announce(
                f"[Logger] Initialized with log level: {level_name(level)}")

    @property
    def level(self) -> int:
        """Current threshold."""
        return self.gate.threshold

    def set_log_level(self, level) -> None:
        """Replace the threshold and announce the change at Info.

        Accepts anything parse_level() does. An unparseable value is
        reported on the error channel and the threshold is left alone.
        """
        try:
            level = parse_level(level)
        except ValueError as e:
            self._dispatch(f"[Logger] {e}", Severity.ERROR)
            return
        self.gate.set_threshold(level)
        self._announce(
            f"[Logger] LogLevel updated to: {level_name(self.gate.threshold)}")

    def is_enabled(self, level: int) -> bool:
        """True when a record at `level` would reach the sink."""
        return self.gate.is_enabled(level)

    def log(self, level: int, source: Any, message: str) -> None:
        """Format and dispatch one record if `level` passes the gate.

        Args:
            level: Severity or any int
            source: Origin of the call (see source_name())
            message: Message text, passed through unmodified
        """
        if not self.gate.is_enabled(level):
            return

        context = source if self.sink.is_engine_object(source) else None
        label = source_name(source, self.sink.is_engine_object)
        text = format_message(label, message, level, clock=self.clock)
        self._dispatch(text, level, context)

    def development(self, source: Any, message: str) -> None:
        self.log(Severity.DEVELOPMENT, source, message)

    def info(self, source: Any, message: str) -> None:
        self.log(Severity.INFO, source, message)

    def warning(self, source: Any, message: str) -> None:
        self.log(Severity.WARNING, source, message)

    def error(self, source: Any, message: str) -> None:
        self.log(Severity.ERROR, source, message)

    def _announce(self, text: str) -> None:
        if self.gate.is_enabled(Severity.INFO):
            self._dispatch(text, Severity.INFO)

    def _dispatch(self, text: str, level: int, context: Any = None) -> None:
        channel = channel_for_level(level)
        if channel is Channel.INFO:
            self.sink.log(text, context)
        elif channel is Channel.WARNING:
            self.sink.log_warning(text, context)
        elif channel is Channel.ERROR:
            self.sink.log_error(text, context)
        else:
            self.sink.log_error(
                f"[Logger] Unknown log level: {level_name(level)} | {text}")


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[ConsoleLogger] = None


def init_logging(sink: ConsoleSink = None, level: int = DEFAULT_LEVEL,
                 clock: Callable[[], datetime] = None) -> ConsoleLogger:
    """Install a new module-level ConsoleLogger.

    The new logger announces its initial threshold on its own sink.

    Args:
        sink: Host console (default: StreamSink on stderr)
        level: Initial threshold
        clock: Time source for timestamps (default: datetime.now)

    Returns:
        The installed ConsoleLogger
    """
    global _logger
    _logger = ConsoleLogger(sink=sink, level=level, clock=clock)
    return _logger


def get_logger() -> ConsoleLogger:
    """Get the module-level ConsoleLogger, creating a default if needed."""
    global _logger
    if _logger is None:
        _logger = ConsoleLogger()
    return _logger
