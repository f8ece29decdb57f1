"""
log_lib — leveled console logging with host colour markup.

A host-agnostic logging library providing:
- Ordered severities with a single minimum-level gate
- Source labels derived from services, strings, engine objects, classes
- Timestamped, colour-marked console strings
- Channel routing onto a host console sink
- Function tracing decorator

Public API:
    ConsoleLogger     — the logging facade
    init_logging      — singleton initialization
    get_logger        — access singleton
    Severity          — level enumeration
    LevelGate         — threshold cell
    source_name       — source label resolution
    format_message    — console string formatting
    Channel           — host console channels
    ConsoleSink       — host sink protocol
    StreamSink        — stream-backed sink
    RecordingSink     — in-memory sink
    trace             — function tracing decorator
"""

from .manager import ConsoleLogger, init_logging, get_logger
from .levels import Severity, LEVEL_NAMES, level_name, parse_level
from .gate import LevelGate
from .naming import VersionedService, source_name
from .formatter import (
    LEVEL_COLORS, FALLBACK_COLOR, color_for_level, format_message,
    format_timestamp,
)
from .channels import Channel, channel_for_level
from .sinks import ConsoleSink, StreamSink, RecordingSink
from .trace import trace

__all__ = [
    'ConsoleLogger', 'init_logging', 'get_logger',
    'Severity', 'LEVEL_NAMES', 'level_name', 'parse_level',
    'LevelGate',
    'VersionedService', 'source_name',
    'LEVEL_COLORS', 'FALLBACK_COLOR', 'color_for_level', 'format_message',
    'format_timestamp',
    'Channel', 'channel_for_level',
    'ConsoleSink', 'StreamSink', 'RecordingSink',
    'trace',
]
