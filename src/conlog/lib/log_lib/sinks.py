"""
Host console sinks.

A sink is the host application's console: three channels, each taking
a formatted string and an optional context handle, plus a predicate
telling the logger which objects are engine-native (and therefore
usable as click-to-locate context).

StreamSink is the stand-alone default. Hosts embedding the library
supply their own ConsoleSink implementation.
"""

import sys
from typing import Any, List, Optional, Protocol, TextIO, Tuple

from .channels import Channel


class ConsoleSink(Protocol):
    """Host console collaborator.

    Implementations are assumed to be thread-safe. They receive fully
    formatted strings and must not expect structured records.
    """

    def log(self, message: str, context: Any = None) -> None:
        """Informational channel."""

    def log_warning(self, message: str, context: Any = None) -> None:
        """Warning channel."""

    def log_error(self, message: str, context: Any = None) -> None:
        """Error channel."""

    def is_engine_object(self, obj: Any) -> bool:
        """True if obj is an engine-native object with a locatable identity."""


class StreamSink:
    """Console sink writing each message as a line to a text stream.

    There is no engine in a plain Python process, so no object is ever
    treated as engine-native and context handles are ignored.

    Args:
        file: Output stream (default: stderr, looked up at write time)
        prefixes: Prepend "[WARN] " / "[ERROR] " on those channels
    """

    PREFIXES = {
        Channel.INFO: '',
        Channel.WARNING: '[WARN] ',
        Channel.ERROR: '[ERROR] ',
    }

    def __init__(self, file: TextIO = None, prefixes: bool = False):
        self._file = file
        self.prefixes = prefixes

    @property
    def file(self) -> TextIO:
        return self._file if self._file is not None else sys.stderr

    def _write(self, channel: Channel, message: str) -> None:
        prefix = self.PREFIXES[channel] if self.prefixes else ''
        print(f"{prefix}{message}", file=self.file)

    def log(self, message: str, context: Any = None) -> None:
        self._write(Channel.INFO, message)

    def log_warning(self, message: str, context: Any = None) -> None:
        self._write(Channel.WARNING, message)

    def log_error(self, message: str, context: Any = None) -> None:
        self._write(Channel.ERROR, message)

    def is_engine_object(self, obj: Any) -> bool:
        return False


class RecordingSink:
    """Console sink that keeps everything it receives.

    Useful for hosts that poll console output, and for tests. Records
    are (channel, message, context) tuples in arrival order.

    Args:
        engine_types: Classes whose instances count as engine objects
    """

    def __init__(self, engine_types: Tuple[type, ...] = ()):
        self.engine_types = tuple(engine_types)
        self.records: List[Tuple[Channel, str, Any]] = []

    def log(self, message: str, context: Any = None) -> None:
        self.records.append((Channel.INFO, message, context))

    def log_warning(self, message: str, context: Any = None) -> None:
        self.records.append((Channel.WARNING, message, context))

    def log_error(self, message: str, context: Any = None) -> None:
        self.records.append((Channel.ERROR, message, context))

    def is_engine_object(self, obj: Any) -> bool:
        return bool(self.engine_types) and isinstance(obj, self.engine_types)

    def messages(self, channel: Optional[Channel] = None) -> List[str]:
        """Messages received, optionally only those on one channel."""
        return [msg for ch, msg, _ in self.records
                if channel is None or ch is channel]

    def clear(self) -> None:
        """Forget everything received so far."""
        self.records.clear()
