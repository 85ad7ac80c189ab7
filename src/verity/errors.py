"""Assertion failure raised by the should combinators."""

from verity.matchers.base import MatcherResult


class MatcherFailedError(AssertionError):
    """AssertionError with attached MatcherResult.

    Attributes
    ----------
    matcher_result : MatcherResult
        The result that caused the failure.
    negated : bool
        ``True`` when the value was expected *not* to match.
    """

    def __init__(self, result: MatcherResult, negated: bool = False):
        self.matcher_result = result
        self.negated = negated
        message = result.negated_failure_message if negated else result.failure_message
        super().__init__(message)
