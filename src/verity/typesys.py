"""Runtime type-descriptor primitives used by the matchers.

Type descriptors are plain Python classes. Generic aliases such as
``list[int]`` are erased to their origin class before any comparison,
since parameters are not observable on instances at runtime.
"""

import builtins
import types
from typing import Any, Union, get_origin

from verity.config import get_settings


def erase(tp: Any) -> type:
    """Strip generic parameters from ``tp`` and return the runtime class.

    ``typing.Any`` is treated as ``object``.

    Raises
    ------
    TypeError
        If ``tp`` is neither a class nor a parameterized class. Unions such
        as ``int | str`` or ``Optional[int]`` are rejected.
    """
    if tp is Any:
        return object
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        raise TypeError(f"Union type descriptors are not supported, got {tp!r}")
    if isinstance(origin, type):
        tp = origin
    if not isinstance(tp, type):
        raise TypeError(f"Expected a class as type descriptor, got {tp!r}")
    return tp


def qualified_name(tp: type) -> str:
    """Render ``tp`` as ``module.QualName``; builtins are rendered bare."""
    module = getattr(tp, "__module__", None)
    name = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", repr(tp))
    if module in (None, builtins.__name__):
        return name
    return f"{module}.{name}"


def is_subclass_of(actual: type, expected: type) -> bool:
    """Hierarchical membership, including virtual subclasses of ABCs."""
    return issubclass(actual, expected)


def render_value(value: Any) -> str:
    """``repr`` of ``value``, truncated per the configured maximum length."""
    text = repr(value)
    max_len = get_settings().max_value_repr_length
    if max_len and len(text) > max_len:
        return text[:max_len] + "..."
    return text
