"""
Host console channels and level routing.

The host console exposes three channels. Each known level maps onto
exactly one of them:

    development, info  →  info
    warning            →  warning
    error              →  error

Levels outside that table have no channel; the logger reports them on
the error channel with an "unknown level" wrapper instead of dropping
them.
"""

from enum import Enum
from typing import Optional

from .levels import Severity


class Channel(Enum):
    """Output channels of the host console."""

    INFO = 'info'
    WARNING = 'warning'
    ERROR = 'error'


LEVEL_CHANNELS = {
    Severity.DEVELOPMENT: Channel.INFO,
    Severity.INFO: Channel.INFO,
    Severity.WARNING: Channel.WARNING,
    Severity.ERROR: Channel.ERROR,
}


def channel_for_level(level: int) -> Optional[Channel]:
    """Return the channel for a level, or None if the level is unknown."""
    return LEVEL_CHANNELS.get(level)
