from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, overload

from assertchain.util.render import render

from .base import AssertionFailure

if TYPE_CHECKING:
    from .mapping import MappingAssertion

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")

A = TypeVar("A", bound="Assertion[Any]")


class Assertion(Generic[T]):
    """A value under test together with an optional label.

    The wrapper only aliases ``subject``; it never copies or mutates it.
    Passing assertions return a wrapper so calls can be chained, failing
    ones raise ``AssertionViolation``.
    """

    def __init__(self, subject: T, description: str | None = None) -> None:
        self._subject = subject
        self._description = description

    @property
    def subject(self) -> T:
        return self._subject

    @property
    def description(self) -> str | None:
        return self._description

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._subject!r}, description={self._description!r})"

    def named(self: A, description: str) -> A:
        return type(self)(self._subject, description)

    def rebind(self, value: U) -> Assertion[U]:
        """Wrap a value derived from the subject, keeping this wrapper's label."""
        return wrap(value, self._description)

    def _failure(self) -> AssertionFailure:
        return AssertionFailure.from_assertion(self)

    def is_equal_to(self: A, expected: Any) -> A:
        if self._subject != expected:
            (
                self._failure()
                .with_expected(f"<{render(expected)}>")
                .with_actual(f"<{render(self._subject)}>")
                .fail()
            )
        return self

    def is_not_equal_to(self: A, unexpected: Any) -> A:
        if self._subject == unexpected:
            (
                self._failure()
                .with_expected(f"<{render(self._subject)}> to not equal <{render(unexpected)}>")
                .with_actual("equal")
                .fail()
            )
        return self

    def matches(self: A, predicate: Callable[[T], bool]) -> A:
        if not predicate(self._subject):
            self._failure().fail_with_message(
                f"expectation failed for value <{render(self._subject)}>"
            )
        return self

    def map(self, fn: Callable[[T], U]) -> Assertion[U]:
        return self.rebind(fn(self._subject))


@overload
def wrap(subject: Mapping[K, V], description: str | None = None) -> MappingAssertion[K, V]: ...


@overload
def wrap(subject: T, description: str | None = None) -> Assertion[T]: ...


def wrap(subject: Any, description: str | None = None) -> Assertion[Any]:
    from .mapping import MappingAssertion

    if isinstance(subject, Mapping):
        return MappingAssertion(subject, description)
    return Assertion(subject, description)


@overload
def assert_that(subject: Mapping[K, V]) -> MappingAssertion[K, V]: ...


@overload
def assert_that(subject: T) -> Assertion[T]: ...


def assert_that(subject: Any) -> Assertion[Any]:
    return wrap(subject)


class Asserting:
    def __init__(self, description: str) -> None:
        self.description = description

    @overload
    def that(self, subject: Mapping[K, V]) -> MappingAssertion[K, V]: ...

    @overload
    def that(self, subject: T) -> Assertion[T]: ...

    def that(self, subject: Any) -> Assertion[Any]:
        return wrap(subject, self.description)


def asserting(description: str) -> Asserting:
    return Asserting(description)
