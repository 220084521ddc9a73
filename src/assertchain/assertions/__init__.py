from .base import AssertionFailure, AssertionViolation
from .mapping import MappingAssertion
from .subject import Asserting, Assertion, assert_that, asserting, wrap

__all__ = [
    "Asserting",
    "Assertion",
    "AssertionFailure",
    "AssertionViolation",
    "MappingAssertion",
    "assert_that",
    "asserting",
    "wrap",
]
