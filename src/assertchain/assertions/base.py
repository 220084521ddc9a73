from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from .subject import Assertion

logger = logging.getLogger(__name__)


class AssertionViolation(AssertionError):
    """Raised when an assertion does not hold.

    Subclasses the builtin ``AssertionError`` so test harnesses report it as
    an ordinary test failure. The library never catches it.
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
        description: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual
        self.description = description

    def __str__(self) -> str:
        return self.message


def _with_description(description: str | None, body: str) -> str:
    if description is None:
        return body
    return f"{description}: {body}"


@dataclass(frozen=True)
class AssertionFailure:
    expected: str | None = None
    actual: str | None = None
    description: str | None = None

    @classmethod
    def from_assertion(cls, assertion: Assertion) -> AssertionFailure:
        return cls(description=assertion.description)

    def with_expected(self, expected: str) -> AssertionFailure:
        return replace(self, expected=expected)

    def with_actual(self, actual: str) -> AssertionFailure:
        return replace(self, actual=actual)

    @property
    def message(self) -> str:
        if self.expected is None or self.actual is None:
            raise ValueError("invalid assertion: expected and actual must both be set")
        body = f"\n\texpected: {self.expected}\n\t but was: {self.actual}"
        return _with_description(self.description, body)

    def fail(self) -> NoReturn:
        message = self.message
        logger.debug("Assertion failed:%s", message)
        raise AssertionViolation(
            message,
            expected=self.expected,
            actual=self.actual,
            description=self.description,
        )

    def fail_with_message(self, message: str) -> NoReturn:
        full_message = _with_description(self.description, message)
        logger.debug("Assertion failed: %s", full_message)
        raise AssertionViolation(full_message, description=self.description)
