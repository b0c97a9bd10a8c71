"""Payload helpers for Kubernetes API responses in tests."""

from collections.abc import Sequence
from typing import Any


def endpoint_subset(
    *,
    ips: Sequence[str] = ("10.244.0.5",),
    ports: Sequence[int] = (8080,),
) -> dict[str, Any]:
    """Create an endpoint subset payload."""
    return {
        "addresses": [
            {
                "ip": ip,
                "nodeName": "node-1",
                "targetRef": {
                    "kind": "Pod",
                    "namespace": "default",
                    "name": f"pod-{ip.replace('.', '-')}",
                    "uid": "6f1c7a1e-0000-4000-8000-000000000000",
                },
            }
            for ip in ips
        ],
        "ports": [
            {"name": f"port-{port}", "port": port, "protocol": "TCP"} for port in ports
        ],
    }


def endpoints(
    *,
    name: str = "my-service",
    namespace: str = "default",
    subsets: Sequence[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Create an Endpoints object payload.

    Returns a realistic Kubernetes Endpoints structure. Passing an empty
    ``subsets`` omits the field, as the API server does.
    """
    payload: dict[str, Any] = {
        "metadata": {
            "name": name,
            "namespace": namespace,
            "uid": "0b8c5e3d-0000-4000-8000-000000000000",
            "resourceVersion": "12345",
            "creationTimestamp": "2099-01-01T12:00:00Z",
            "labels": {"app": name},
        },
    }
    if subsets is None:
        subsets = [endpoint_subset()]
    if subsets:
        payload["subsets"] = list(subsets)
    return payload


def endpoints_list(
    *,
    items: Sequence[dict[str, Any]] = (),
    continue_token: str | None = None,
) -> dict[str, Any]:
    """Create a response payload for GET /api/v1/endpoints."""
    metadata: dict[str, Any] = {"resourceVersion": "67890"}
    if continue_token is not None:
        metadata["continue"] = continue_token
    return {
        "kind": "EndpointsList",
        "apiVersion": "v1",
        "metadata": metadata,
        "items": list(items),
    }
