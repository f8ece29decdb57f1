"""
Message formatting with host-console colour markup.

Output shape (the trailing space is part of the format):

    <color=yellow>[14:03:07.042] [Inventory v1.0]: slot 3 is empty</color>

The markup is the host console's rich-text syntax. Nothing is escaped:
a message containing "</color>" breaks the markup, same as it would if
the caller wrote it to the console directly.
"""

from datetime import datetime
from typing import Callable, Optional

from .levels import Severity


LEVEL_COLORS = {
    Severity.DEVELOPMENT: '#87CEEB',
    Severity.INFO: 'lime',
    Severity.WARNING: 'yellow',
    Severity.ERROR: 'red',
}

FALLBACK_COLOR = 'white'

MESSAGE_TEMPLATE = "<color={color}>[{timestamp}] [{source}]: {message}</color> "


def color_for_level(level: int) -> str:
    """Return the markup colour for a level, white if unmapped."""
    return LEVEL_COLORS.get(level, FALLBACK_COLOR)


def format_timestamp(moment: datetime) -> str:
    """Render HH:MM:SS.mmm (24-hour, millisecond precision)."""
    return f"{moment:%H:%M:%S}.{moment.microsecond // 1000:03d}"


def format_message(source_label: str, message, level: int,
                   clock: Optional[Callable[[], datetime]] = None) -> str:
    """Build the console string for one record.

    Args:
        source_label: Label from source_name()
        message: Message text, passed through unmodified
        level: Severity or any int
        clock: Returns the current time (default: datetime.now)

    Returns:
        The coloured console string
    """
    moment = (clock or datetime.now)()
    return MESSAGE_TEMPLATE.format(
        color=color_for_level(level),
        timestamp=format_timestamp(moment),
        source=source_label,
        message=message,
    )
