"""Base matcher classes and result types."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from functools import wraps
from typing import Any, Generic, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

T = TypeVar("T")

NULL_FAILURE_MESSAGE = "Expecting actual not to be null"


class MatcherResult(BaseModel):
    """Outcome of evaluating a matcher against one value.

    Both messages are rendered eagerly, since the caller decides which one
    to show only after the result exists.

    Attributes
    ----------
    id
        Unique identifier for this result instance.
    matcher_name
        Name of the matcher that produced the result, when known.
    passed
        Whether the value satisfied the matcher.
    failure_message
        Shown when the value was expected to match and did not.
    negated_failure_message
        Shown when the value was expected not to match and did.

    Notes
    -----
    ``bool(result)`` is equivalent to ``result.passed``.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    matcher_name: str | None = None

    passed: bool
    failure_message: str
    negated_failure_message: str

    def __bool__(self) -> bool:
        return self.passed

    def inverted(self) -> MatcherResult:
        """Return the result with ``passed`` negated and the messages swapped."""
        return self.model_copy(
            update={
                "passed": not self.passed,
                "failure_message": self.negated_failure_message,
                "negated_failure_message": self.failure_message,
            }
        )


class Matcher(ABC, Generic[T]):
    """A reusable predicate that explains its failures in both polarities.

    Matchers hold only the parameters they were built with and never keep
    the tested value, so one instance can be tested any number of times.

    Attributes
    ----------
    name : str
        Identifier reported in results; defaults to the subclass name.
    """

    name: str

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = cls.__name__

    @abstractmethod
    def test(self, value: T) -> MatcherResult:
        """Evaluate the matcher against ``value``."""

    def __call__(self, value: T) -> MatcherResult:
        return self.test(value)

    def invert(self) -> Matcher[T]:
        """Return a matcher that passes exactly when this one fails."""
        return _InvertedMatcher(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class _InvertedMatcher(Matcher[T]):
    def __init__(self, inner: Matcher[T]):
        self.inner = inner
        self.name = f"not({inner.name})"

    def test(self, value: T) -> MatcherResult:
        result = self.inner.test(value).inverted()
        return result.model_copy(update={"matcher_name": self.name})

    def invert(self) -> Matcher[T]:
        return self.inner


class FunctionMatcher(Matcher[T]):
    """Matcher backed by a plain ``fn(value) -> MatcherResult`` callable."""

    def __init__(self, fn: Callable[[T], MatcherResult], name: str | None = None):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", type(self).__name__)

    def test(self, value: T) -> MatcherResult:
        result = self.fn(value)
        if result.matcher_name is None:
            result = result.model_copy(update={"matcher_name": self.name})
        return result


def matcher(fn: Callable[[T], MatcherResult]) -> Matcher[T]:
    """Decorator to turn a test function into a :class:`Matcher`.

    Example:
        >>> @matcher
        >>> def is_empty(value):
        >>>     return MatcherResult(
        >>>         passed=len(value) == 0,
        >>>         failure_message=f"{value!r} should be empty",
        >>>         negated_failure_message=f"{value!r} should not be empty",
        >>>     )
        >>>
        >>> assert is_empty([]).passed is True
    """
    return wraps(fn)(FunctionMatcher(fn))


class NullGuardMatcher(Matcher[T | None]):
    """Fails on ``None`` and delegates every present value to ``inner``.

    ``inner`` is never tested with ``None``, in either polarity.
    """

    def __init__(self, inner: Matcher[T]):
        self.inner = inner
        self.name = inner.name

    def test(self, value: T | None) -> MatcherResult:
        if value is None:
            logger.debug("%s received None; failing without delegating", self.name)
            return MatcherResult(
                matcher_name=self.name,
                passed=False,
                failure_message=NULL_FAILURE_MESSAGE,
                negated_failure_message=NULL_FAILURE_MESSAGE,
            )
        return self.inner.test(value)

    def invert(self) -> Matcher[T | None]:
        # The guard stays outermost so None keeps failing after inversion
        return NullGuardMatcher(self.inner.invert())


def never_null_matcher(
    test: Matcher[T] | Callable[[T], MatcherResult],
    name: str | None = None,
) -> Matcher[T | None]:
    """Wrap ``test`` so that a ``None`` value fails before it is consulted.

    Parameters
    ----------
    test
        A matcher, or a function taking a present value and returning a
        :class:`MatcherResult`.
    name
        Optional matcher name; defaults to the wrapped matcher's name.

    Returns
    -------
    Matcher
        A matcher accepting ``None``, which it always reports as a failure.
    """
    inner: Matcher[Any] = test if isinstance(test, Matcher) else FunctionMatcher(test, name)
    guarded = NullGuardMatcher(inner)
    if name is not None:
        guarded.name = name
    return guarded
