from __future__ import annotations

from typing import Iterator

import pytest

from assertchain.config import reset_config


@pytest.fixture(autouse=True)
def default_config() -> Iterator[None]:
    reset_config()
    yield
    reset_config()
