"""Base model configuration for configuration and wire payloads."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model: immutable, unknown fields rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")
