"""
Function tracing decorator.

Routes trace output through the ConsoleLogger singleton as Development
records, with the traced function's module as the source label.
"""

import functools
import inspect
from pathlib import Path

from .levels import Severity


def _short_repr(value) -> str:
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the ConsoleLogger.

    Logs entry with arguments, exit with the return value (when not
    None) and exceptions, all at Development level. When Development
    records are gated out the function is called directly.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_logger

        log = get_logger()
        if not log.is_enabled(Severity.DEVELOPMENT):
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__name__
        target = f"{module_name}.{func_name}"

        args_repr = [_short_repr(arg) for arg in args]
        args_repr.extend(f"{key}={_short_repr(value)}"
                         for key, value in kwargs.items())
        args_str = ', '.join(args_repr)

        log.development(module_name, f"[TRACE] >> {target}({args_str})")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.development(
                module_name,
                f"[TRACE] !! {target} raised: {type(e).__name__}: {e}")
            raise

        if result is not None:
            log.development(
                module_name,
                f"[TRACE] << {target} returned: {_short_repr(result)}")
        return result

    return wrapper
