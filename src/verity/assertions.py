"""Assertion entry points for runtime types, identity and null checks.

Python has no flow-sensitive narrowing driven by a function call, so the
positive entry points return the checked value typed as the expected
class. Bind the return value to get the narrowed handle:

    >>> items = should_be_instance_of(value, list)
    >>> items.append(1)  # type checkers now treat items as list

Ignoring the return value still performs the runtime check; only the
static narrowing is lost.
"""

from collections.abc import Callable
from typing import Any, TypeVar, cast

from verity.matchers.types import be_instance_of, be_null, be_of_type, be_the_same_instance_as
from verity.should import should, should_not

T = TypeVar("T")
V = TypeVar("V")


def should_be_instance_of(
    value: Any,
    expected: type[T],
    on_success: Callable[[T], Any] | None = None,
) -> T:
    """Verify that ``value`` is an instance of ``expected``, subclasses included.

    Opposite of :func:`should_not_be_instance_of`. For an exact type, use
    :func:`should_be_type_of`.

    Parameters
    ----------
    value
        The value under test. ``None`` always fails.
    expected
        The class to check against.
    on_success
        Called with the value once the check has passed.

    Returns
    -------
    T
        ``value``, typed as ``expected``.

    Raises
    ------
    MatcherFailedError
        If ``value`` is not an instance of ``expected``.

    Examples
    --------
    >>> items: Sequence[int] = [1, 2, 3]
    >>> should_be_instance_of(items, list, lambda it: it.append(4))
    """
    should(value, be_instance_of(expected))
    narrowed = cast(T, value)
    if on_success is not None:
        on_success(narrowed)
    return narrowed


def should_not_be_instance_of(value: Any, expected: type) -> None:
    """Verify that ``value`` is not an instance of ``expected`` or any subclass.

    ``None`` passes, since it is an instance of no class this check accepts.
    """
    should_not(value, be_instance_of(expected))


def should_be_type_of(
    value: Any,
    expected: type[T],
    on_success: Callable[[T], Any] | None = None,
) -> T:
    """Verify that the class of ``value`` is exactly ``expected``.

    No inheritance is considered: a ``bool`` is not of type ``int``. If you
    want subclasses to match, use :func:`should_be_instance_of`.

    Returns
    -------
    T
        ``value``, typed as ``expected``.

    Raises
    ------
    MatcherFailedError
        If ``type(value)`` is not ``expected``.
    """
    should(value, be_of_type(expected))
    narrowed = cast(T, value)
    if on_success is not None:
        on_success(narrowed)
    return narrowed


def should_not_be_type_of(value: Any, expected: type) -> None:
    """Verify that the class of ``value`` is not exactly ``expected``."""
    should_not(value, be_of_type(expected))


def should_be_same_instance_as(value: V, ref: Any) -> V:
    """Verify that ``value`` is ``ref`` itself, not merely equal to it."""
    should(value, be_the_same_instance_as(ref))
    return value


def should_not_be_same_instance_as(value: Any, ref: Any) -> None:
    """Verify that ``value`` is a different object from ``ref``."""
    should_not(value, be_the_same_instance_as(ref))


def should_be_null(value: Any) -> None:
    """Verify that ``value`` is ``None``.

    Opposite of :func:`should_not_be_null`.
    """
    should(value, be_null())


def should_not_be_null(value: V | None) -> V:
    """Verify that ``value`` is not ``None`` and return it.

    The return type drops ``None``, so the result can be passed where a
    present value is required:

        >>> name: str | None = lookup()
        >>> use_name(should_not_be_null(name))
    """
    should_not(value, be_null())
    return cast(V, value)
