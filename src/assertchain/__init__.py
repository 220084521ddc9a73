import logging

from .assertions import (
    Assertion,
    AssertionFailure,
    AssertionViolation,
    MappingAssertion,
    assert_that,
    asserting,
)
from .config import AssertConfig, configure, get_config, load_config, reset_config

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AssertConfig",
    "Assertion",
    "AssertionFailure",
    "AssertionViolation",
    "MappingAssertion",
    "assert_that",
    "asserting",
    "configure",
    "get_config",
    "load_config",
    "reset_config",
]
