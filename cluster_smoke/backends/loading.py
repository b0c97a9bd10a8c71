"""Loading of backends from entry points."""

from importlib.metadata import entry_points
from typing import Any

from cluster_smoke.backends.manifest import BackendManifest
from cluster_smoke.backends.networking.base import EndpointSource
from cluster_smoke.backends.orchestration.base import WorkflowOrchestrator

ORCHESTRATOR_GROUP = "cluster_smoke.orchestrators"
ENDPOINT_SOURCE_GROUP = "cluster_smoke.endpoint_sources"


class BackendNotFoundError(Exception):
    """Raised when a backend is not found."""


def load_manifest(group: str, key: str) -> BackendManifest[Any, Any]:
    """Load a backend manifest by key from an entry point group.

    Args:
        group: Entry point group to search
        key: The backend key as registered in pyproject.toml
             (e.g., "onos-rest", "kubernetes")

    Returns:
        The backend manifest instance

    Raises:
        BackendNotFoundError: If no backend with the given key is found

    """
    entries = entry_points(group=group)

    for entry in entries:
        if entry.name == key:
            manifest: BackendManifest[Any, Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise BackendNotFoundError(
        f"Backend '{key}' not found. Available backends: {available}"
    )


def load_orchestrator_manifest(
    key: str,
) -> BackendManifest[Any, WorkflowOrchestrator]:
    """Load a workflow orchestrator manifest by key."""
    return load_manifest(ORCHESTRATOR_GROUP, key)


def load_endpoint_source_manifest(key: str) -> BackendManifest[Any, EndpointSource]:
    """Load an endpoint source manifest by key."""
    return load_manifest(ENDPOINT_SOURCE_GROUP, key)
