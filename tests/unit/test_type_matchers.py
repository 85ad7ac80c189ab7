from collections.abc import Sequence
from typing import Any, Optional, Protocol, runtime_checkable

import pytest

from verity.matchers.base import NULL_FAILURE_MESSAGE
from verity.matchers.types import (
    be_instance_of,
    be_instance_of_narrowed,
    be_null,
    be_of_type,
    be_the_same_instance_as,
    instance_of,
)


class Animal:
    def __repr__(self) -> str:
        return "Animal()"


class Dog(Animal):
    def __repr__(self) -> str:
        return "Dog()"


@runtime_checkable
class Barks(Protocol):
    def bark(self) -> str: ...


class Terrier(Dog):
    def bark(self) -> str:
        return "yip"


class TestBeNull:
    def test_none_passes(self):
        result = be_null().test(None)

        assert result.passed is True
        assert result.matcher_name == "be_null"

    @pytest.mark.parametrize("value", [0, "", [], False, "NonNull"])
    def test_present_values_fail(self, value):
        assert be_null().test(value).passed is False

    def test_messages(self):
        result = be_null().test("NonNull")

        assert result.failure_message == "Expected value to be null, but was not-null."
        assert result.negated_failure_message == "Expected value to not be null, but was null."


class TestBeTheSameInstanceAs:
    def test_same_object_passes(self):
        payload = {"id": 1}

        assert be_the_same_instance_as(payload).test(payload).passed is True

    def test_equal_copy_fails(self):
        first, second = {"id": 1}, {"id": 1}

        result = be_the_same_instance_as(first).test(second)

        assert first == second
        assert result.passed is False
        assert result.failure_message == "{'id': 1} should be the same reference as {'id': 1}"
        assert result.negated_failure_message == "{'id': 1} should not be the same reference as {'id': 1}"

    def test_none_is_same_as_none(self):
        assert be_the_same_instance_as(None).test(None).passed is True


class TestBeInstanceOf:
    def test_exact_class_passes(self):
        assert be_instance_of(Dog).test(Dog()).passed is True

    def test_subclass_passes(self):
        assert be_instance_of(Animal).test(Dog()).passed is True
        assert be_instance_of(int).test(True).passed is True

    def test_abstract_base_passes(self):
        assert be_instance_of(Sequence).test([1, 2, 3]).passed is True

    def test_runtime_checkable_protocol(self):
        assert be_instance_of(Barks).test(Terrier()).passed is True
        assert be_instance_of(Barks).test(Dog()).passed is False

    def test_superclass_instance_fails(self):
        result = be_instance_of(Dog).test(Animal())

        assert result.passed is False
        assert result.failure_message.startswith("Animal() is of type ")
        assert result.failure_message.endswith("Animal but expected " + f"{Dog.__module__}.{Dog.__qualname__}")

    def test_builtin_names_are_bare(self):
        result = be_instance_of(int).test("a")

        assert result.failure_message == "'a' is of type str but expected int"
        assert result.negated_failure_message == "'a' should not be of type int"

    @pytest.mark.parametrize("expected", [object, int, Animal])
    def test_none_never_matches(self, expected):
        result = be_instance_of(expected).test(None)

        assert result.passed is False
        assert result.failure_message == NULL_FAILURE_MESSAGE

    def test_generic_alias_is_erased(self):
        assert be_instance_of(list[int]).test(["not", "ints"]).passed is True

    def test_non_class_rejected(self):
        with pytest.raises(TypeError):
            be_instance_of("int")

    @pytest.mark.parametrize("expected", [int | str, Optional[int]])
    def test_union_rejected(self, expected):
        with pytest.raises(TypeError):
            be_instance_of(expected)

    def test_any_matches_every_present_value(self):
        assert be_instance_of(Any).test(1).passed is True
        assert be_instance_of(Any).test("x").passed is True
        assert be_instance_of(Any).test(None).passed is False

    def test_alias(self):
        assert instance_of is be_instance_of


class TestBeInstanceOfNarrowed:
    def test_subclass_passes(self):
        assert be_instance_of_narrowed(Animal).test(Dog()).passed is True

    def test_none_is_tested_like_any_value(self):
        assert be_instance_of_narrowed(type(None)).test(None).passed is True
        assert be_instance_of_narrowed(object).test(None).passed is True

    def test_negated_message(self):
        result = be_instance_of_narrowed(int).test(1)

        assert result.negated_failure_message == "1 should not be an instance of int"


class TestBeOfType:
    def test_exact_class_passes(self):
        assert be_of_type(list).test([1, 2, 3]).passed is True

    def test_subclass_fails(self):
        result = be_of_type(int).test(True)

        assert result.passed is False
        assert result.failure_message == "True should be of type int"
        assert result.negated_failure_message == "True should not be of type int"

    def test_interface_fails_for_concrete_instance(self):
        assert be_of_type(Sequence).test([1, 2, 3]).passed is False

    def test_none_never_matches_even_none_type(self):
        assert be_of_type(type(None)).test(None).passed is False
        assert be_of_type(object).test(None).passed is False

    @pytest.mark.parametrize("expected", [int | str, Optional[int]])
    def test_union_rejected(self, expected):
        with pytest.raises(TypeError):
            be_of_type(expected)

    def test_exact_and_hierarchical_disagree_on_subclasses(self):
        dog = Dog()

        assert be_instance_of(Animal).test(dog).passed is True
        assert be_of_type(Animal).test(dog).passed is False
