"""Abstract base class for endpoint record sources."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from cluster_smoke.models.endpoints import EndpointRecord


class EndpointQueryError(Exception):
    """Raised when endpoint records cannot be fetched."""


@dataclass(frozen=True, kw_only=True)
class EndpointSource(ABC):
    """Abstract base for cluster networking services that expose endpoints."""

    @abstractmethod
    async def list_endpoints(self) -> Sequence[EndpointRecord]:
        """Fetch all endpoint records in one query.

        Returns:
            Endpoint records in no particular order

        Raises:
            EndpointQueryError: If the query fails

        """
