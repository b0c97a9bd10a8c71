"""Models for endpoint records returned by the cluster networking service.

Field names follow the Kubernetes ``Endpoints`` object so API responses can be
validated directly. Unknown fields are ignored.
"""

from collections.abc import Sequence

from pydantic import Field

from cluster_smoke.models.base import Model


class EndpointAddress(Model):
    """An address that serves traffic for an endpoint subset."""

    ip: str


class EndpointPort(Model):
    """A port exposed by an endpoint subset."""

    port: int
    name: str | None = None
    protocol: str | None = None


class EndpointSubset(Model):
    """Group of addresses that share the same set of ports."""

    addresses: Sequence[EndpointAddress] = Field(default_factory=list)
    ports: Sequence[EndpointPort] = Field(default_factory=list)


class ObjectMeta(Model):
    """Object metadata, only the parts the lister needs."""

    name: str
    namespace: str | None = None


class EndpointRecord(Model):
    """A named endpoint record with its address/port subsets."""

    metadata: ObjectMeta
    subsets: Sequence[EndpointSubset] = Field(default_factory=list)

    @property
    def name(self) -> str:
        """Record name from metadata."""
        return self.metadata.name
