"""Helpers for wrapping and unwrapping arbitrary values."""

from functools import wraps
from typing import Any, Callable, Optional

from active_container.wrapper import Wrapper

COLLECTION_TYPES = (list, tuple, set, frozenset)


def wrap(obj: Any) -> Any:
    """Wraps a record, or each record in a collection, by class name."""
    if obj is None:
        return None
    if isinstance(obj, COLLECTION_TYPES):
        return Wrapper.wrap_collection(obj)
    return Wrapper.wrap(obj)


def unwrap(obj: Any) -> Any:
    """Gets the record(s) behind a wrapper or a collection of wrappers.

    Values that are not wrappers are returned unchanged.
    """
    if isinstance(obj, Wrapper):
        return obj.record
    if isinstance(obj, (list, tuple)):
        return [unwrap(item) for item in obj]
    return obj


def wraps_result(wrapper_class: Optional[type[Wrapper]] = None) -> Callable:
    """Decorator that wraps the records returned by a function.

    Lists and tuples are wrapped as collections. With no `wrapper_class`,
    wrappers are resolved from each record's class name.
    """
    wrapper_class = Wrapper if wrapper_class is None else wrapper_class

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def handle(*args, **kwargs):
            ret = func(*args, **kwargs)
            if isinstance(ret, (list, tuple)):
                return wrapper_class.wrap_collection(ret)
            return wrapper_class.wrap(ret)

        return handle

    return decorator
