from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import AssertConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "assertchain.yaml"
_SECTION = "assertchain"


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_config(path: Path) -> AssertConfig:
    config_path = path
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILENAME
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    data = _load_yaml(config_path)
    section = data.get(_SECTION)
    if isinstance(section, dict):
        data = section
    logger.debug("Loaded assertion config from %s: %s", config_path, data)
    return AssertConfig.model_validate(data)
