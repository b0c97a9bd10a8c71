"""ONOS REST orchestration backend module."""

from cluster_smoke.backends.orchestration.onos_rest.client import (
    OnosRestOrchestrator,
)
from cluster_smoke.backends.orchestration.onos_rest.config import OnosRestConfig
from cluster_smoke.backends.orchestration.onos_rest.manifest import (
    onos_rest_manifest,
)

__all__ = ["OnosRestConfig", "OnosRestOrchestrator", "onos_rest_manifest"]
