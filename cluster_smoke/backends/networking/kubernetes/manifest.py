"""Kubernetes endpoint source manifest."""

from cluster_smoke.backends.manifest import BackendManifest
from cluster_smoke.backends.networking.kubernetes.config import KubernetesConfig
from cluster_smoke.backends.networking.kubernetes.source import (
    KubernetesEndpointSource,
)

kubernetes_manifest = BackendManifest(
    config_cls=KubernetesConfig,
    backend_factory=KubernetesEndpointSource.from_config,
)
