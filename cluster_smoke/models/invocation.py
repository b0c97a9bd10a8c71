"""Models for workflow invocation requests and their outcomes."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import Field

from cluster_smoke.models.base import Model


class InvocationRequest(Model):
    """A single workflow invocation against a target context."""

    context_name: str = Field(..., description="Target context (workplace) name")
    workflow_id: str = Field(..., description="Workflow identifier to invoke")
    data: Mapping[str, Any] = Field(
        default_factory=dict,
        description="Opaque data payload, passed through verbatim",
    )


@dataclass(frozen=True, kw_only=True)
class InvocationSuccess:
    """The orchestration engine accepted the request."""


@dataclass(frozen=True, kw_only=True)
class InvocationFailure:
    """The orchestration engine rejected the request or could not be reached."""

    reason: str
    trace: str | None = None


type InvocationResult = InvocationSuccess | InvocationFailure


@dataclass(frozen=True, kw_only=True)
class InvocationOutcome:
    """Result of one submitted request.

    Outcomes are created once per issued request and never retried.
    """

    request: InvocationRequest
    result: InvocationSuccess | InvocationFailure
    duration: float = 0.0

    @property
    def succeeded(self) -> bool:
        """Whether the request was accepted."""
        return isinstance(self.result, InvocationSuccess)
