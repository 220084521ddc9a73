from __future__ import annotations

import pytest

from assertchain.assertions.base import AssertionViolation
from assertchain.assertions.mapping import MappingAssertion
from assertchain.assertions.subject import Assertion, assert_that, asserting


def test_assert_that_dispatches_on_subject_shape() -> None:
    assert type(assert_that(1)) is Assertion
    assert type(assert_that({"a": 1})) is MappingAssertion
    assert type(assert_that([1, 2])) is Assertion


def test_wrapper_aliases_subject() -> None:
    subject = {"a": [1]}
    wrapper = assert_that(subject)

    assert wrapper.subject is subject
    assert wrapper.description is None


def test_named_returns_new_wrapper_with_description() -> None:
    original = assert_that({"a": 1})
    named = original.named("config")

    assert named is not original
    assert isinstance(named, MappingAssertion)
    assert named.description == "config"
    assert original.description is None
    assert named.subject is original.subject


def test_asserting_attaches_description() -> None:
    with pytest.raises(AssertionViolation) as exc_info:
        asserting("total").that(1).is_equal_to(2)

    assert str(exc_info.value) == "total: \n\texpected: <2>\n\t but was: <1>"


def test_is_equal_to() -> None:
    assert_that("hi").is_equal_to("hi").is_not_equal_to("hey")

    with pytest.raises(AssertionViolation) as exc_info:
        assert_that("hi").is_equal_to("hey")

    assert str(exc_info.value) == "\n\texpected: <'hey'>\n\t but was: <'hi'>"


def test_is_not_equal_to() -> None:
    with pytest.raises(AssertionViolation) as exc_info:
        assert_that(5).is_not_equal_to(5)

    assert str(exc_info.value) == "\n\texpected: <5> to not equal <5>\n\t but was: equal"


def test_matches() -> None:
    assert_that(4).matches(lambda value: value % 2 == 0)

    with pytest.raises(AssertionViolation) as exc_info:
        assert_that(3).named("odd").matches(lambda value: value % 2 == 0)

    assert str(exc_info.value) == "odd: expectation failed for value <3>"


def test_map_keeps_description() -> None:
    mapped = assert_that("hello").named("greeting").map(len)

    assert mapped.subject == 5
    assert mapped.description == "greeting"
    mapped.is_equal_to(5)


def test_rebind_selects_family_for_new_value() -> None:
    rebound = assert_that(1).named("outer").rebind({"k": "v"})

    assert isinstance(rebound, MappingAssertion)
    assert rebound.description == "outer"


def test_passing_assertions_are_repeatable() -> None:
    subject = [1, 2, 3]
    wrapper = assert_that(subject)

    wrapper.is_equal_to([1, 2, 3])
    wrapper.is_equal_to([1, 2, 3])

    assert subject == [1, 2, 3]
