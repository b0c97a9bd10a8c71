"""Registry of workflow test scenarios."""

import copy
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from cluster_smoke.models.invocation import InvocationRequest


class ScenarioName(StrEnum):
    """Names of the supported workflow test scenarios."""

    INVOKE_SAMPLE = "invoke-sample"


@dataclass(frozen=True, kw_only=True)
class Scenario:
    """Recipe for a batch of workflow invocations.

    Each generated context receives every workflow in ``workflow_ids``, in
    order, with its own copy of ``payload``.
    """

    name: ScenarioName
    description: str
    workflow_ids: Sequence[str]
    context_prefix: str = "test_name"
    payload: Mapping[str, Any] = field(default_factory=dict)
    requires_repeat: bool = True

    def context_names(self, repeat: int) -> Iterator[str]:
        """Context names for indices 0..repeat inclusive, generated lazily.

        Names depend only on the index, so re-running with the same repeat
        count targets the same contexts. A negative count yields none.
        """
        for index in range(repeat + 1):
            yield f"{self.context_prefix}-{index}"

    def request_count(self, repeat: int) -> int:
        """Number of requests ``build_requests`` yields for a repeat count."""
        return max(repeat + 1, 0) * len(self.workflow_ids)

    def build_requests(self, repeat: int) -> Iterator[InvocationRequest]:
        """Expand the recipe into requests in issuance order.

        Requests are built one at a time as the caller consumes them.
        """
        for context_name in self.context_names(repeat):
            for workflow_id in self.workflow_ids:
                yield InvocationRequest(
                    context_name=context_name,
                    workflow_id=workflow_id,
                    data=copy.deepcopy(dict(self.payload)),
                )


SCENARIOS: Mapping[str, Scenario] = {
    ScenarioName.INVOKE_SAMPLE: Scenario(
        name=ScenarioName.INVOKE_SAMPLE,
        description="number of test for invoke-sample",
        workflow_ids=(
            "sample.workflow-0",
            "sample.workflow-1",
            "sample.workflow-2",
        ),
        payload={"count": 0},
    ),
}


def get_scenario(name: str) -> Scenario | None:
    """Look up a registered scenario by name."""
    return SCENARIOS.get(name)
