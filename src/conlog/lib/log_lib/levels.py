"""
Severity levels for the console logging facade.

The emit rule is the reverse of a verbosity dial:

    message.level >= threshold  →  message is delivered

Level assignments:
    ←── chattier ───────── default ───────── quieter ──→
       -1            0          1          2
    development     info     warning     error

Any integer is a valid level. Values outside the table still pass through
the gate and the formatter; they are reported as unknown at dispatch time.
"""

from enum import IntEnum


class Severity(IntEnum):
    """Ordered log severity. Comparison is by integer rank."""

    DEVELOPMENT = -1    # Only useful while developing, hidden by default
    INFO = 0            # Normal progress of the program
    WARNING = 1         # Potential problem, execution continues
    ERROR = 2           # Needs fixing, behaviour may already be wrong


# Console names, matching the host's enum rendering
LEVEL_NAMES = {
    Severity.DEVELOPMENT: 'Development',
    Severity.INFO: 'Info',
    Severity.WARNING: 'Warning',
    Severity.ERROR: 'Error',
}

DEFAULT_LEVEL = Severity.INFO


def level_name(level) -> str:
    """Return the display name for a level, or its number if unmapped."""
    try:
        return LEVEL_NAMES[Severity(level)]
    except ValueError:
        return str(int(level))


def parse_level(value) -> int:
    """Convert a config value into a level.

    Accepts a Severity, an int, a numeric string ("-1") or a
    case-insensitive name ("warning", "Error").

    Raises:
        ValueError: if a string is neither numeric nor a known name.
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Severity(value)
        except ValueError:
            return value
    text = str(value).strip()
    try:
        return parse_level(int(text))
    except ValueError:
        pass
    for member, name in LEVEL_NAMES.items():
        if text.lower() == name.lower():
            return member
    raise ValueError(f"Unknown log level: {value!r}")
