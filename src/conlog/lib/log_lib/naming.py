"""
Source labels for log records.

A log call names its origin with whatever the caller has at hand: a
service object, a plain string, an engine object, a class, or anything
else. source_name() turns that into the label shown between brackets.
"""

from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class VersionedService(Protocol):
    """Anything exposing a service name and version."""

    name: str
    version: str


def source_name(source: Any,
                is_engine_object: Optional[Callable[[Any], bool]] = None) -> str:
    """Derive a human-readable label for a log source.

    Resolution order (first match wins):
        1. versioned service  →  "{name} v{version}"
        2. str                →  unchanged
        3. engine object      →  its .name
        4. class              →  class name
        5. anything else      →  type name, "Unknown" for None

    Args:
        source: The object the log call came from
        is_engine_object: Host predicate recognising engine-native objects

    Returns:
        The label string
    """
    if not isinstance(source, type) and isinstance(source, VersionedService):
        return f"{source.name} v{source.version}"
    if isinstance(source, str):
        return source
    if is_engine_object is not None and is_engine_object(source):
        return source.name
    if isinstance(source, type):
        return source.__name__
    if source is None:
        return "Unknown"
    return type(source).__name__
