"""Shared base for request and API record models."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that tolerates unknown fields in API payloads."""

    model_config = ConfigDict(frozen=True, extra="ignore")
