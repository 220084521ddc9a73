from __future__ import annotations

import logging
from typing import Any

from .models import AssertConfig

logger = logging.getLogger(__name__)

_active = AssertConfig()


def get_config() -> AssertConfig:
    return _active


def configure(config: AssertConfig | None = None, **overrides: Any) -> AssertConfig:
    """Replace the active config and return the one it replaced.

    Keyword overrides are applied on top of ``config`` (or of the currently
    active config when none is given) and validated like a loaded file.
    """
    global _active
    previous = _active
    base = config if config is not None else previous
    if overrides:
        base = AssertConfig.model_validate({**base.model_dump(), **overrides})
    _active = base
    logger.debug("Assertion config set to %s", base)
    return previous


def reset_config() -> AssertConfig:
    return configure(AssertConfig())
