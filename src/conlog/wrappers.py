"""Typed value wrappers for registration and lookup.

Two services that both need "a string" can't be told apart by type in a
registry keyed on type. Subclassing ValueWrapper gives each its own
type while keeping value semantics:

    class ApiUrl(ValueWrapper[str]): pass
    class CdnUrl(ValueWrapper[str]): pass

    registry.register(ApiUrl, ApiUrl("https://api.example"))
    url = registry.resolve(ApiUrl).unwrap()
"""

from typing import Callable, Generic, Optional, TypeVar


T = TypeVar("T")

NULL_WRAPPER_TEXT = "Null Wrapper"


class ValueWrapper(Generic[T]):
    """Immutable box around a single value.

    Equality and hashing follow the wrapped value: two wrappers around
    equal values are equal, whatever their identity. A wrapper is only
    as hashable as its value; hashing one around a list raises TypeError.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T):
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> T:
        """The wrapped value."""
        return self._value

    def unwrap(self) -> T:
        return self._value

    def __eq__(self, other):
        if not isinstance(other, ValueWrapper):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value) if self._value is not None else 0

    def __str__(self):
        return str(self._value) if self._value is not None else NULL_WRAPPER_TEXT

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


def unwrap(wrapper: Optional[ValueWrapper[T]],
           default_factory: Callable[[], T] = None) -> Optional[T]:
    """Return the wrapped value, or a zero value if wrapper is None.

    Args:
        wrapper: A ValueWrapper, or None
        default_factory: Builds the zero value (e.g. int, str, list);
            without it a missing wrapper unwraps to None

    Returns:
        The wrapped value or the zero value
    """
    if wrapper is None:
        return default_factory() if default_factory is not None else None
    return wrapper.value
