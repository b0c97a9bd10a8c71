"""Dry-run orchestration backend module."""

from cluster_smoke.backends.orchestration.dry_run.client import DryRunOrchestrator
from cluster_smoke.backends.orchestration.dry_run.config import DryRunConfig
from cluster_smoke.backends.orchestration.dry_run.manifest import dry_run_manifest

__all__ = ["DryRunConfig", "DryRunOrchestrator", "dry_run_manifest"]
