"""
LevelGate — the single threshold cell shared by a logger.

Reads happen on every log call, writes only through set_threshold().
The threshold is stored as one attribute, so a write is a single
reference assignment: readers see either the old or the new value,
never a torn one, and nobody blocks.
"""

from .levels import DEFAULT_LEVEL


class LevelGate:
    """Minimum-severity filter.

    Usage::

        gate = LevelGate()
        gate.is_enabled(Severity.DEVELOPMENT)   # False
        gate.set_threshold(Severity.DEVELOPMENT)
        gate.is_enabled(Severity.DEVELOPMENT)   # True
    """

    def __init__(self, threshold: int = DEFAULT_LEVEL):
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        """Current minimum level."""
        return self._threshold

    def set_threshold(self, level: int) -> None:
        """Replace the threshold. Any integer level is accepted."""
        self._threshold = level

    def is_enabled(self, level: int) -> bool:
        """True when a message at `level` should be delivered."""
        return int(level) >= int(self._threshold)
