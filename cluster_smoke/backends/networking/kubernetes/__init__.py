"""Kubernetes endpoint source module."""

from cluster_smoke.backends.networking.kubernetes.config import KubernetesConfig
from cluster_smoke.backends.networking.kubernetes.manifest import kubernetes_manifest
from cluster_smoke.backends.networking.kubernetes.source import (
    KubernetesEndpointSource,
)

__all__ = ["KubernetesConfig", "KubernetesEndpointSource", "kubernetes_manifest"]
