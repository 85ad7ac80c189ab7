"""The ``should`` / ``should_not`` combinators."""

import logging
from typing import TypeVar

from verity.context import record_result
from verity.errors import MatcherFailedError
from verity.matchers.base import Matcher, MatcherResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _evaluate(value: T, matcher: Matcher[T], negated: bool) -> MatcherResult:
    result = matcher.test(value)
    record_result(result)
    logger.debug(
        "%s %s -> passed=%s",
        "should_not" if negated else "should",
        result.matcher_name or matcher.name,
        result.passed,
    )
    if result.passed is negated:
        raise MatcherFailedError(result, negated=negated)
    return result


def should(value: T, matcher: Matcher[T]) -> MatcherResult:
    """Assert that ``value`` satisfies ``matcher``.

    Returns
    -------
    MatcherResult
        The passing result.

    Raises
    ------
    MatcherFailedError
        With the result's ``failure_message`` if the matcher did not pass.
    """
    return _evaluate(value, matcher, negated=False)


def should_not(value: T, matcher: Matcher[T]) -> MatcherResult:
    """Assert that ``value`` does not satisfy ``matcher``.

    Raises
    ------
    MatcherFailedError
        With the result's ``negated_failure_message`` if the matcher passed.
    """
    return _evaluate(value, matcher, negated=True)


should_be = should
should_not_be = should_not
