from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DecoderSettings(BaseModel):
    # None keeps recursion unbounded, as deep as the interpreter allows.
    max_depth: Optional[int] = Field(None, ge=1)
    trace_ring_size: int = Field(200, ge=1)

    model_config = ConfigDict(frozen=True, extra="forbid")


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
