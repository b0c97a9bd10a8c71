"""ONOS REST orchestration backend manifest."""

from cluster_smoke.backends.manifest import BackendManifest
from cluster_smoke.backends.orchestration.onos_rest.client import (
    OnosRestOrchestrator,
)
from cluster_smoke.backends.orchestration.onos_rest.config import OnosRestConfig

onos_rest_manifest = BackendManifest(
    config_cls=OnosRestConfig,
    backend_factory=OnosRestOrchestrator.from_config,
)
