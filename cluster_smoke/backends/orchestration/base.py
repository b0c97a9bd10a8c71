"""Abstract base class for workflow orchestration backends."""

import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass

from cluster_smoke.models.invocation import (
    InvocationFailure,
    InvocationRequest,
    InvocationResult,
    InvocationSuccess,
)


class InvocationError(Exception):
    """Raised by a backend when the engine rejects or fails a request."""


def format_trace(exc: BaseException) -> str:
    """Format an exception with its traceback for operator diagnostics."""
    return "".join(traceback.format_exception(exc)).rstrip()


@dataclass(frozen=True, kw_only=True)
class WorkflowOrchestrator(ABC):
    """Abstract base for workflow orchestration engines.

    Backends implement ``submit`` and signal failures by raising
    InvocationError. Callers use ``invoke``, which turns those failures into
    an explicit result value.
    """

    @abstractmethod
    async def submit(self, request: InvocationRequest) -> None:
        """Submit a workflow invocation to the engine.

        Args:
            request: Workflow identifier, target context and data payload

        Raises:
            InvocationError: If the engine rejects the request or is unreachable

        """

    async def invoke(self, request: InvocationRequest) -> InvocationResult:
        """Submit a request and return its result instead of raising.

        Only InvocationError is converted; anything else propagates so that
        programming errors are not mistaken for engine rejections.
        """
        try:
            await self.submit(request)
        except InvocationError as e:
            return InvocationFailure(reason=str(e), trace=format_trace(e))
        return InvocationSuccess()
