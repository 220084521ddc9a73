from __future__ import annotations

from typing import Any, Iterable, Mapping

from assertchain.config.runtime import get_config


def _truncate(text: str, limit: int | None) -> str:
    if limit is None or len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def render(value: Any) -> str:
    return _truncate(repr(value), get_config().max_repr_length)


def _ordered(keys: Iterable[Any]) -> list[Any]:
    ordered = list(keys)
    if not get_config().sort_keys:
        return ordered
    try:
        return sorted(ordered)
    except TypeError:
        # mixed key types
        return sorted(ordered, key=repr)


def render_keys(mapping: Mapping[Any, Any]) -> str:
    return "[" + ", ".join(render(key) for key in _ordered(mapping.keys())) + "]"
