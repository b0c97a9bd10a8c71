"""Tests for the scenario registry."""

import pytest

from cluster_smoke.scenarios import SCENARIOS, ScenarioName, get_scenario


def test_every_scenario_name_is_registered() -> None:
    """The registry covers the whole enumeration."""
    assert set(SCENARIOS) == set(ScenarioName)


def test_get_scenario_by_plain_string() -> None:
    """Scenarios are found by their command-line name."""
    scenario = get_scenario("invoke-sample")

    assert scenario is not None
    assert scenario.name == ScenarioName.INVOKE_SAMPLE
    assert scenario.requires_repeat


def test_get_scenario_unknown() -> None:
    """Unknown names are not found."""
    assert get_scenario("invoke-unknown") is None


@pytest.mark.parametrize(
    ("repeat", "expected"),
    [
        (-1, []),
        (0, ["test_name-0"]),
        (2, ["test_name-0", "test_name-1", "test_name-2"]),
    ],
)
def test_context_names(repeat: int, expected: list[str]) -> None:
    """Context names are derived from indices 0..repeat."""
    scenario = SCENARIOS[ScenarioName.INVOKE_SAMPLE]

    assert list(scenario.context_names(repeat)) == expected


def test_build_requests_order_and_payload() -> None:
    """Requests iterate contexts, then the fixed workflow order."""
    scenario = SCENARIOS[ScenarioName.INVOKE_SAMPLE]

    requests = list(scenario.build_requests(1))

    assert [(r.context_name, r.workflow_id) for r in requests] == [
        ("test_name-0", "sample.workflow-0"),
        ("test_name-0", "sample.workflow-1"),
        ("test_name-0", "sample.workflow-2"),
        ("test_name-1", "sample.workflow-0"),
        ("test_name-1", "sample.workflow-1"),
        ("test_name-1", "sample.workflow-2"),
    ]
    assert all(r.data == {"count": 0} for r in requests)


def test_build_requests_does_not_share_template() -> None:
    """Mutating one payload does not leak into the template or other requests."""
    scenario = SCENARIOS[ScenarioName.INVOKE_SAMPLE]

    first, second, *_ = scenario.build_requests(0)
    first.data["count"] = 5  # type: ignore[index]

    assert second.data == {"count": 0}
    assert scenario.payload == {"count": 0}


@pytest.mark.parametrize(("repeat", "expected"), [(-5, 0), (0, 3), (3, 12)])
def test_request_count(repeat: int, expected: int) -> None:
    """Counts three requests per context without building them."""
    scenario = SCENARIOS[ScenarioName.INVOKE_SAMPLE]

    assert scenario.request_count(repeat) == expected


def test_build_requests_is_lazy_for_large_repeat() -> None:
    """The first request is available without expanding the whole batch."""
    scenario = SCENARIOS[ScenarioName.INVOKE_SAMPLE]

    requests = scenario.build_requests(2_147_483_647)

    first = next(requests)
    assert (first.context_name, first.workflow_id) == (
        "test_name-0",
        "sample.workflow-0",
    )
    assert scenario.request_count(2_147_483_647) == 3 * 2_147_483_648
