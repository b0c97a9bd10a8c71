"""Dry-run orchestration backend manifest."""

from cluster_smoke.backends.manifest import BackendManifest
from cluster_smoke.backends.orchestration.dry_run.client import DryRunOrchestrator
from cluster_smoke.backends.orchestration.dry_run.config import DryRunConfig

dry_run_manifest = BackendManifest(
    config_cls=DryRunConfig,
    backend_factory=DryRunOrchestrator.from_config,
)
