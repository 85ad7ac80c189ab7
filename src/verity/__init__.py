"""Verity - type, identity and null matchers for test assertions."""

from .assertions import (
    should_be_instance_of,
    should_be_null,
    should_be_same_instance_as,
    should_be_type_of,
    should_not_be_instance_of,
    should_not_be_null,
    should_not_be_same_instance_as,
    should_not_be_type_of,
)
from .context import matcher_results_collector
from .errors import MatcherFailedError
from .matchers import (
    Matcher,
    MatcherResult,
    be_instance_of,
    be_instance_of_narrowed,
    be_null,
    be_of_type,
    be_the_same_instance_as,
    instance_of,
    matcher,
    never_null_matcher,
)
from .should import should, should_be, should_not, should_not_be
from .version import __version__


__all__ = [
    # Matcher contract
    "Matcher",
    "MatcherResult",
    "MatcherFailedError",
    "matcher",
    "never_null_matcher",
    # Matchers
    "be_null",
    "be_the_same_instance_as",
    "be_instance_of",
    "instance_of",
    "be_instance_of_narrowed",
    "be_of_type",
    # Combinators
    "should",
    "should_not",
    "should_be",
    "should_not_be",
    # Entry points
    "should_be_instance_of",
    "should_not_be_instance_of",
    "should_be_type_of",
    "should_not_be_type_of",
    "should_be_same_instance_as",
    "should_not_be_same_instance_as",
    "should_be_null",
    "should_not_be_null",
    # Collection
    "matcher_results_collector",
]
