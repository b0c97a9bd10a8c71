"""CLI entry point for cluster smoke-test commands."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from cluster_smoke.backends.loading import (
    load_endpoint_source_manifest,
    load_orchestrator_manifest,
)
from cluster_smoke.backends.networking.base import EndpointQueryError
from cluster_smoke.endpoints import EndpointLister, format_endpoint_table
from cluster_smoke.harness import BatchHarness, BatchReport
from cluster_smoke.models.invocation import InvocationFailure, InvocationOutcome
from cluster_smoke.scenarios import SCENARIOS

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
}


def outcome_status(outcome: InvocationOutcome) -> str:
    """Status label for an outcome."""
    return "success" if outcome.succeeded else "failure"


def outcome_message(outcome: InvocationOutcome) -> str | None:
    """Failure reason for an outcome, if any."""
    if isinstance(outcome.result, InvocationFailure):
        return outcome.result.reason
    return None


def log_results_summary(log: logging.Logger, report: BatchReport) -> None:
    """Log a formatted summary of invocation outcomes."""
    log.info("=" * 80)
    log.info("Workflow Test Summary: %s", report.test_name)
    log.info("=" * 80)

    for error in report.errors:
        log.info("%s %s", STATUS_SYMBOLS["failure"], error)

    for outcome in report.outcomes:
        status = outcome_status(outcome)
        log.info(
            "%s %s @ %s: %s (%.2fs)",
            STATUS_SYMBOLS[status],
            outcome.request.workflow_id,
            outcome.request.context_name,
            status,
            outcome.duration,
        )
        if message := outcome_message(outcome):
            log.info("  Message: %s", message)


def format_output(report: BatchReport) -> dict[str, Any]:
    """Format a batch report for JSON output."""
    results = [
        {
            "workflow_id": outcome.request.workflow_id,
            "context": outcome.request.context_name,
            "status": outcome_status(outcome),
            "duration": outcome.duration,
            "message": outcome_message(outcome),
        }
        for outcome in report.outcomes
    ]

    return {
        "test_name": report.test_name,
        "total": len(results),
        "succeeded": sum(1 for r in results if r["status"] == "success"),
        "failed": sum(1 for r in results if r["status"] == "failure"),
        "errors": list(report.errors),
        "results": results,
    }


async def run_workflow_test(
    orchestrator_key: str,
    orchestrator_config_json: str,
    test_name: str | None,
    arg1: str | None,
    concurrency: int = 1,
    invocation_timeout: float | None = None,
) -> int:
    """Run a workflow test scenario and return exit code."""
    log = logging.getLogger("cluster_smoke")

    log.info("Loading orchestrator: %s", orchestrator_key)
    manifest = load_orchestrator_manifest(orchestrator_key)

    config_dict = json.loads(orchestrator_config_json)
    config = manifest.config_cls(**config_dict)

    async with manifest.backend_factory(config) as orchestrator:
        harness = BatchHarness(
            orchestrator=orchestrator,
            max_concurrency=concurrency,
            invocation_timeout=invocation_timeout,
        )
        report = await harness.run(test_name, arg1)

    log_results_summary(log, report)
    print(json.dumps(format_output(report), indent=2))

    return 1 if report.has_errors else 0


async def run_list_endpoints(
    source_key: str,
    source_config_json: str,
    query_timeout: float | None = None,
) -> int:
    """List endpoint records and return exit code."""
    log = logging.getLogger("cluster_smoke")

    log.info("Loading endpoint source: %s", source_key)
    manifest = load_endpoint_source_manifest(source_key)

    config_dict = json.loads(source_config_json)
    config = manifest.config_cls(**config_dict)

    try:
        async with manifest.backend_factory(config) as source:
            lister = EndpointLister(source=source, query_timeout=query_timeout)
            rows = await lister.list_endpoints()
    except EndpointQueryError as e:
        log.error("%s", e)
        return 1
    except TimeoutError:
        log.error("Endpoint query timed out after %s seconds", query_timeout)
        return 1

    print(format_endpoint_table(rows))
    return 0


def positive_int(value: str) -> int:
    """Argument type for counts that must be at least one."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per operator command."""
    parser = argparse.ArgumentParser(description="Cluster smoke-test tooling")
    commands = parser.add_subparsers(dest="command", required=True)

    scenario_names = ", ".join(SCENARIOS)
    workflow = commands.add_parser(
        "workflow-test",
        help="Invoke a batch of test workflows",
        description="workflow test cli",
    )
    workflow.add_argument(
        "--orchestrator",
        default="onos-rest",
        help="Orchestrator key (onos-rest, dry-run)",
    )
    workflow.add_argument(
        "--orchestrator-config",
        default="{}",
        help="JSON configuration for the orchestrator",
    )
    workflow.add_argument(
        "--concurrency",
        type=positive_int,
        default=1,
        help="Maximum number of invocations in flight",
    )
    workflow.add_argument(
        "--invocation-timeout",
        type=float,
        default=None,
        help="Seconds to wait for a single invocation",
    )
    workflow.add_argument(
        "test_name",
        nargs="?",
        metavar="test-name",
        help=f"Test name ({scenario_names})",
    )
    workflow.add_argument(
        "arg1",
        nargs="?",
        help="number of test for invoke-sample",
    )

    endpoints = commands.add_parser(
        "k8s-endpoints",
        help="Lists all kubernetes endpoints",
        description="Lists all kubernetes endpoints",
    )
    endpoints.add_argument(
        "--source",
        default="kubernetes",
        help="Endpoint source key (kubernetes)",
    )
    endpoints.add_argument(
        "--source-config",
        default="{}",
        help="JSON configuration for the endpoint source",
    )
    endpoints.add_argument(
        "--query-timeout",
        type=float,
        default=None,
        help="Seconds to wait for the endpoint query",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "workflow-test":
        coroutine = run_workflow_test(
            orchestrator_key=args.orchestrator,
            orchestrator_config_json=args.orchestrator_config,
            test_name=args.test_name,
            arg1=args.arg1,
            concurrency=args.concurrency,
            invocation_timeout=args.invocation_timeout,
        )
    else:
        coroutine = run_list_endpoints(
            source_key=args.source,
            source_config_json=args.source_config,
            query_timeout=args.query_timeout,
        )

    sys.exit(asyncio.run(coroutine))


if __name__ == "__main__":  # pragma: no cover
    main()
