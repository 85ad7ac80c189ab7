"""Matchers for null checks, reference identity and runtime types."""

from typing import Any

from verity.matchers.base import FunctionMatcher, Matcher, MatcherResult, never_null_matcher
from verity.typesys import erase, is_subclass_of, qualified_name, render_value


def be_null() -> Matcher[Any]:
    """Matcher that verifies if a reference is ``None``.

    Examples
    --------
    >>> should(None, be_null())        # passes
    >>> should("value", be_null())     # fails
    >>> should_not(None, be_null())    # fails
    >>> should_not("value", be_null()) # passes
    """

    def test(value: Any) -> MatcherResult:
        return MatcherResult(
            passed=value is None,
            failure_message="Expected value to be null, but was not-null.",
            negated_failure_message="Expected value to not be null, but was null.",
        )

    return FunctionMatcher(test, "be_null")


def be_the_same_instance_as(ref: Any) -> Matcher[Any]:
    """Matcher passing only for ``ref`` itself, never for an equal copy."""

    def test(value: Any) -> MatcherResult:
        rendered, rendered_ref = render_value(value), render_value(ref)
        return MatcherResult(
            passed=value is ref,
            failure_message=f"{rendered} should be the same reference as {rendered_ref}",
            negated_failure_message=f"{rendered} should not be the same reference as {rendered_ref}",
        )

    return FunctionMatcher(test, "be_the_same_instance_as")


def be_instance_of(expected: Any) -> Matcher[Any]:
    """Matcher checking that a value is an instance of ``expected`` or a subclass.

    ``None`` never matches. Generic aliases are erased, so
    ``be_instance_of(list[int])`` behaves like ``be_instance_of(list)``.

    Raises
    ------
    TypeError
        If ``expected`` is not a class.
    """
    expected = erase(expected)
    expected_name = qualified_name(expected)

    def test(value: Any) -> MatcherResult:
        actual = type(value)
        rendered = render_value(value)
        return MatcherResult(
            passed=is_subclass_of(actual, expected),
            failure_message=f"{rendered} is of type {qualified_name(actual)} but expected {expected_name}",
            negated_failure_message=f"{rendered} should not be of type {expected_name}",
        )

    return never_null_matcher(test, "be_instance_of")


instance_of = be_instance_of


def be_instance_of_narrowed(expected: Any) -> Matcher[Any]:
    """Unguarded :func:`be_instance_of` for values already known to be present.

    Unlike :func:`be_instance_of`, ``None`` is tested like any other value,
    so ``be_instance_of_narrowed(type(None))`` matches it.
    """
    expected = erase(expected)
    expected_name = qualified_name(expected)

    def test(value: Any) -> MatcherResult:
        actual = type(value)
        rendered = render_value(value)
        return MatcherResult(
            passed=is_subclass_of(actual, expected),
            failure_message=f"{rendered} is of type {qualified_name(actual)} but expected {expected_name}",
            negated_failure_message=f"{rendered} should not be an instance of {expected_name}",
        )

    return FunctionMatcher(test, "be_instance_of_narrowed")


def be_of_type(expected: Any) -> Matcher[Any]:
    """Matcher checking that a value's class is exactly ``expected``.

    Subclasses do not match: ``True`` is not of type ``int``. ``None`` never
    matches.

    Raises
    ------
    TypeError
        If ``expected`` is not a class.
    """
    expected = erase(expected)
    expected_name = qualified_name(expected)

    def test(value: Any) -> MatcherResult:
        rendered = render_value(value)
        return MatcherResult(
            passed=type(value) is expected,
            failure_message=f"{rendered} should be of type {expected_name}",
            negated_failure_message=f"{rendered} should not be of type {expected_name}",
        )

    return never_null_matcher(test, "be_of_type")
