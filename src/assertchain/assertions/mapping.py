from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Generic, TypeVar

from assertchain.util.render import render, render_keys

from .json_schema import first_schema_error, load_schema
from .subject import Assertion

K = TypeVar("K")
V = TypeVar("V")


class MappingAssertion(Assertion[Mapping[K, V]], Generic[K, V]):
    """Assertions over a mapping subject.

    Keys and values are rendered with ``repr`` in failure text. Key listings
    follow the mapping's own iteration order unless ``sort_keys`` is
    configured.
    """

    def __init__(self, subject: Mapping[K, V], description: str | None = None) -> None:
        if not isinstance(subject, Mapping):
            raise TypeError(
                f"mapping assertions require a Mapping subject, got {type(subject).__name__}"
            )
        super().__init__(subject, description)

    def has_length(self, expected: int) -> MappingAssertion[K, V]:
        actual = len(self._subject)
        if actual != expected:
            (
                self._failure()
                .with_expected(f"hashmap to have length <{expected}>")
                .with_actual(f"<{actual}>")
                .fail()
            )
        return self

    def is_empty(self) -> MappingAssertion[K, V]:
        if self._subject:
            (
                self._failure()
                .with_expected("an empty hashmap")
                .with_actual(f"a hashmap with length <{len(self._subject)}>")
                .fail()
            )
        return self

    def is_not_empty(self) -> MappingAssertion[K, V]:
        if not self._subject:
            (
                self._failure()
                .with_expected("a non-empty hashmap")
                .with_actual("an empty hashmap")
                .fail()
            )
        return self

    def contains_key(self, expected_key: K) -> Assertion[V]:
        """Assert the key is present and continue with its value."""
        if expected_key in self._subject:
            return self.rebind(self._subject[expected_key])
        (
            self._failure()
            .with_expected(f"hashmap to contain key <{render(expected_key)}>")
            .with_actual(f"<{render_keys(self._subject)}>")
            .fail()
        )

    def does_not_contain_key(self, expected_key: K) -> MappingAssertion[K, V]:
        if expected_key in self._subject:
            (
                self._failure()
                .with_expected(f"hashmap to not contain key <{render(expected_key)}>")
                .with_actual("present in hashmap")
                .fail()
            )
        return self

    def contains_key_with_value(
        self, expected_key: K, expected_value: V
    ) -> MappingAssertion[K, V]:
        failure = self._failure().with_expected(
            f"hashmap containing key <{render(expected_key)}> "
            f"with value <{render(expected_value)}>"
        )
        if expected_key not in self._subject:
            failure.with_actual(
                f"no matching key, keys are <{render_keys(self._subject)}>"
            ).fail()

        value = self._subject[expected_key]
        if value != expected_value:
            failure.with_actual(
                f"key <{render(expected_key)}> with value <{render(value)}> instead"
            ).fail()
        return self

    contains_entry = contains_key_with_value

    def does_not_contain_entry(
        self, expected_key: K, expected_value: V
    ) -> MappingAssertion[K, V]:
        if expected_key in self._subject and self._subject[expected_key] == expected_value:
            (
                self._failure()
                .with_expected(
                    f"hashmap to not contain key <{render(expected_key)}> "
                    f"with value <{render(expected_value)}>"
                )
                .with_actual("present in hashmap")
                .fail()
            )
        return self

    def matches_schema(self, schema: Mapping[str, Any] | str | Path) -> MappingAssertion[K, V]:
        error = first_schema_error(dict(self._subject), load_schema(schema))
        if error is not None:
            (
                self._failure()
                .with_expected("hashmap matching schema")
                .with_actual(error)
                .fail()
            )
        return self
