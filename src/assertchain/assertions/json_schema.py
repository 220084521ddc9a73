from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jsonschema


def load_schema(schema: Mapping[str, Any] | str | Path) -> dict[str, Any]:
    if isinstance(schema, Mapping):
        return dict(schema)
    try:
        resolved = Path(schema)
        if not resolved.is_absolute():
            resolved = (Path.cwd() / resolved).resolve()
        loaded = json.loads(resolved.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ValueError(f"Failed to load schema {schema}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError(f"Schema {schema} is not a JSON object")
    return loaded


def _path_key(err: jsonschema.ValidationError) -> list[tuple[bool, Any]]:
    # indices before names, each compared in its own type
    return [(isinstance(part, str), part) for part in err.path]


def first_schema_error(instance: Any, schema: Mapping[str, Any]) -> str | None:
    """Describe the first validation error ordered by instance path, if any."""
    validator = jsonschema.Draft202012Validator(dict(schema))
    errors = sorted(validator.iter_errors(instance), key=_path_key)
    if not errors:
        return None

    first = errors[0]
    path = "/".join(str(part) for part in first.path) or "<root>"
    if first.validator == "required" and isinstance(first.validator_value, list):
        missing = []
        if isinstance(first.instance, dict):
            missing = [field for field in first.validator_value if field not in first.instance]
        if missing:
            return f"{path}: missing required field(s): {', '.join(missing)}"
    return f"{path}: {first.message}"
