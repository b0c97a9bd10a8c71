"""Batch invocation harness for workflow smoke tests."""

import asyncio
import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from cluster_smoke.backends.orchestration.base import (
    WorkflowOrchestrator,
    format_trace,
)
from cluster_smoke.models.invocation import (
    InvocationFailure,
    InvocationOutcome,
    InvocationRequest,
)
from cluster_smoke.scenarios import Scenario, get_scenario

log = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class UsageError(Exception):
    """Raised when test arguments are missing or invalid."""


@dataclass(frozen=True, kw_only=True)
class BatchReport:
    """Everything a harness run reported to the operator."""

    test_name: str | None
    errors: Sequence[str] = ()
    outcomes: Sequence[InvocationOutcome] = ()

    @property
    def failures(self) -> Sequence[InvocationOutcome]:
        """Outcomes whose request was not accepted."""
        return [outcome for outcome in self.outcomes if not outcome.succeeded]

    @property
    def has_errors(self) -> bool:
        """Whether any usage error or failed invocation was reported."""
        return bool(self.errors) or bool(self.failures)


def parse_repeat(arg1: str) -> int:
    """Parse the repeat count as a signed 32-bit base-10 integer."""
    if not INTEGER_PATTERN.fullmatch(arg1):
        raise ValueError(f"invalid literal for repeat count: {arg1!r}")
    value = int(arg1)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"repeat count out of range: {arg1}")
    return value


def resolve_run(test_name: str | None, arg1: str | None) -> tuple[Scenario, int]:
    """Validate test arguments and return the scenario and repeat count.

    Raises:
        UsageError: With the operator-facing message for the first problem

    """
    if not test_name:
        raise UsageError("invalid test-name parameter")

    scenario = get_scenario(test_name)
    if scenario is None:
        raise UsageError(f"Unsupported test-name: {test_name}")

    if not scenario.requires_repeat:
        return scenario, 0

    if arg1 is None:
        raise UsageError(f"arg1 is required for test {scenario.name}")

    try:
        repeat = parse_repeat(arg1)
    except ValueError as e:
        raise UsageError("arg1 should be an integer value") from e
    except Exception as e:
        log.error("Unexpected failure parsing arg1:\n%s", format_trace(e))
        raise UsageError(str(e)) from e

    return scenario, repeat


@dataclass(frozen=True, kw_only=True)
class BatchHarness:
    """Runs a scenario against a workflow orchestrator.

    Every issued request produces exactly one outcome. A failed request never
    stops the rest of the batch.
    """

    orchestrator: WorkflowOrchestrator
    max_concurrency: int = 1
    invocation_timeout: float | None = None

    def __post_init__(self) -> None:
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

    async def run(self, test_name: str | None, arg1: str | None = None) -> BatchReport:
        """Validate arguments, then submit every request of the scenario.

        Args:
            test_name: Registered scenario name
            arg1: Repeat count for scenarios that need one

        Returns:
            Report with usage errors or one outcome per issued request

        """
        try:
            scenario, repeat = resolve_run(test_name, arg1)
        except UsageError as e:
            log.error("%s", e)
            return BatchReport(test_name=test_name, errors=[str(e)])

        log.info(
            "Running %s: %d context(s), %d request(s)",
            scenario.name,
            max(repeat + 1, 0),
            scenario.request_count(repeat),
        )

        outcomes = await self.submit_all(scenario.build_requests(repeat))

        failed = sum(1 for outcome in outcomes if not outcome.succeeded)
        log.info(
            "Batch completed: %d succeeded, %d failed", len(outcomes) - failed, failed
        )
        return BatchReport(test_name=test_name, outcomes=outcomes)

    async def submit_all(
        self, requests: Iterable[InvocationRequest]
    ) -> Sequence[InvocationOutcome]:
        """Submit requests in order and return outcomes in the same order.

        A fixed pool of ``max_concurrency`` workers pulls from ``requests``,
        so each request is built only when a worker is free to issue it.
        """
        pending = enumerate(requests)
        outcomes: dict[int, InvocationOutcome] = {}

        workers = [
            self._worker(pending, outcomes) for _ in range(self.max_concurrency)
        ]
        await asyncio.gather(*workers)

        return [outcomes[index] for index in sorted(outcomes)]

    async def _worker(
        self,
        pending: Iterator[tuple[int, InvocationRequest]],
        outcomes: dict[int, InvocationOutcome],
    ) -> None:
        for index, request in pending:
            try:
                outcomes[index] = await self._submit(request)
            except Exception as e:
                outcomes[index] = self._crashed_outcome(request, e)

    def _crashed_outcome(
        self, request: InvocationRequest, error: Exception
    ) -> InvocationOutcome:
        """Turn an unexpected backend exception into a failure outcome."""
        log.error(
            "Invocation of %s on %s raised: %s",
            request.workflow_id,
            request.context_name,
            error,
            exc_info=error,
        )
        return InvocationOutcome(
            request=request,
            result=InvocationFailure(
                reason=str(error) or type(error).__name__,
                trace=format_trace(error),
            ),
        )

    async def _submit(self, request: InvocationRequest) -> InvocationOutcome:
        loop = asyncio.get_running_loop()
        started = loop.time()
        try:
            async with asyncio.timeout(self.invocation_timeout):
                result = await self.orchestrator.invoke(request)
        except TimeoutError as e:
            result = InvocationFailure(
                reason=f"Invocation timed out after {self.invocation_timeout} seconds",
                trace=format_trace(e),
            )
        duration = loop.time() - started

        if isinstance(result, InvocationFailure):
            log.error(
                "Workflow %s failed on %s: %s\n%s",
                request.workflow_id,
                request.context_name,
                result.reason,
                result.trace,
            )
        else:
            log.info(
                "Workflow %s invoked on %s (%.2fs)",
                request.workflow_id,
                request.context_name,
                duration,
            )

        return InvocationOutcome(request=request, result=result, duration=duration)
