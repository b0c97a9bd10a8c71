"""ONOS REST orchestration backend implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from cluster_smoke.backends.orchestration.base import (
    InvocationError,
    WorkflowOrchestrator,
)
from cluster_smoke.backends.orchestration.onos_rest.config import OnosRestConfig
from cluster_smoke.models.invocation import InvocationRequest

log = logging.getLogger(__name__)

INVOKE_PATH = "workflows/invoke"
ACCEPTED_STATUSES = frozenset([200, 201, 202, 204])


@dataclass(frozen=True, kw_only=True)
class OnosRestOrchestrator(WorkflowOrchestrator):
    """Invokes workflows through the ONOS workflow REST API."""

    config: OnosRestConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: OnosRestConfig
    ) -> AsyncGenerator["OnosRestOrchestrator", None]:
        """Create orchestrator with managed session lifecycle."""
        auth = aiohttp.BasicAuth(config.username, config.password.get_secret_value())
        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            auth=auth,
            headers={"Accept": "application/json"},
        ) as session:
            yield cls(config=config, session=session)

    async def submit(self, request: InvocationRequest) -> None:
        """Post a workflow description to the invoke endpoint."""
        payload = {
            "workplace": request.context_name,
            "id": request.workflow_id,
            "data": dict(request.data),
        }

        log.debug(
            "Invoking workflow: api_base_url=%s, workflow_id=%s, workplace=%s",
            self.config.api_base_url,
            request.workflow_id,
            request.context_name,
        )

        try:
            async with self.session.post(INVOKE_PATH, json=payload) as response:
                if response.status not in ACCEPTED_STATUSES:
                    text = await response.text()
                    raise InvocationError(
                        f"Failed to invoke workflow {request.workflow_id} "
                        f"on {request.context_name}: {response.status} {text}"
                    )
        except aiohttp.ClientError as e:
            raise InvocationError(
                f"Failed to reach workflow service for {request.workflow_id} "
                f"on {request.context_name}: {e}"
            ) from e
