"""Dry-run orchestration backend that only logs requests."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from cluster_smoke.backends.orchestration.base import (
    InvocationError,
    WorkflowOrchestrator,
)
from cluster_smoke.backends.orchestration.dry_run.config import DryRunConfig
from cluster_smoke.models.invocation import InvocationRequest

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class DryRunOrchestrator(WorkflowOrchestrator):
    """Accepts every request without contacting an engine."""

    config: DryRunConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: DryRunConfig
    ) -> AsyncGenerator["DryRunOrchestrator", None]:
        """Create orchestrator; there is nothing to open or close."""
        yield cls(config=config)

    async def submit(self, request: InvocationRequest) -> None:
        """Log the request, rejecting configured workflow IDs."""
        log.info(
            "[dry-run] workflow_id=%s workplace=%s data=%s",
            request.workflow_id,
            request.context_name,
            dict(request.data),
        )
        if request.workflow_id in self.config.fail_workflows:
            raise InvocationError(
                f"Dry-run rejected workflow {request.workflow_id} "
                f"on {request.context_name}"
            )
