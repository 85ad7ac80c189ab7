"""Matcher contract and the type, identity and null matchers."""

from verity.matchers.base import (
    FunctionMatcher,
    Matcher,
    MatcherResult,
    NullGuardMatcher,
    matcher,
    never_null_matcher,
)
from verity.matchers.types import (
    be_instance_of,
    be_instance_of_narrowed,
    be_null,
    be_of_type,
    be_the_same_instance_as,
    instance_of,
)

__all__ = [
    # Contract
    "Matcher",
    "MatcherResult",
    "FunctionMatcher",
    "NullGuardMatcher",
    "matcher",
    "never_null_matcher",
    # Variants
    "be_null",
    "be_the_same_instance_as",
    "be_instance_of",
    "instance_of",
    "be_instance_of_narrowed",
    "be_of_type",
]
