"""Configuration for the dry-run orchestration backend."""

from collections.abc import Sequence

from pydantic import BaseModel, Field


class DryRunConfig(BaseModel):
    """Configuration for the dry-run orchestration backend."""

    # Workflow IDs to reject, for rehearsing failure reporting
    fail_workflows: Sequence[str] = Field(default_factory=list)
