"""Pydantic models for Kubernetes API list responses."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from cluster_smoke.models.endpoints import EndpointRecord


class ListMeta(BaseModel):
    """List metadata carrying the pagination token."""

    continue_token: str | None = Field(default=None, alias="continue")


class EndpointsList(BaseModel):
    """Response from the list endpoints API."""

    metadata: ListMeta = Field(default_factory=ListMeta)
    items: Sequence[EndpointRecord] = Field(default_factory=list)
