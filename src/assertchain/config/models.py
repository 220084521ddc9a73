from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AssertConfig(BaseModel):
    sort_keys: bool = False
    max_repr_length: int | None = Field(default=None, ge=4)

    model_config = ConfigDict(extra="forbid", frozen=True)
