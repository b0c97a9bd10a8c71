"""Kubernetes endpoint source implementation."""

import logging
import ssl
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from pydantic import ValidationError

from cluster_smoke.backends.networking.base import EndpointQueryError, EndpointSource
from cluster_smoke.backends.networking.kubernetes.config import KubernetesConfig
from cluster_smoke.backends.networking.kubernetes.models import EndpointsList
from cluster_smoke.models.endpoints import EndpointRecord

log = logging.getLogger(__name__)

ENDPOINTS_PATH = "api/v1/endpoints"


def build_ssl(config: KubernetesConfig) -> ssl.SSLContext | bool:
    """Build the ssl argument for the connector from the config."""
    if config.ca_file is not None:
        return ssl.create_default_context(cafile=str(config.ca_file))
    return config.verify_ssl


@dataclass(frozen=True, kw_only=True)
class KubernetesEndpointSource(EndpointSource):
    """Lists Endpoints objects across all namespaces."""

    config: KubernetesConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: KubernetesConfig
    ) -> AsyncGenerator["KubernetesEndpointSource", None]:
        """Create source with managed session lifecycle.

        Raises:
            EndpointQueryError: If the token file or CA bundle cannot be read

        """
        headers = {"Accept": "application/json"}
        try:
            token = config.bearer_token()
            ssl_arg = build_ssl(config)
        except OSError as e:
            raise EndpointQueryError(
                f"Failed to load Kubernetes credentials: {e}"
            ) from e
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"

        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            headers=headers,
            connector=aiohttp.TCPConnector(ssl=ssl_arg),
        ) as session:
            yield cls(config=config, session=session)

    async def list_endpoints(self) -> Sequence[EndpointRecord]:
        """Fetch all endpoints, following continue tokens across pages."""
        records: list[EndpointRecord] = []
        continue_token: str | None = None

        while True:
            params = {"limit": str(self.config.page_size)}
            if continue_token:
                params["continue"] = continue_token

            page = await self._get_page(params)
            records.extend(page.items)

            continue_token = page.metadata.continue_token
            if not continue_token:
                break

        log.info("Fetched %d endpoint record(s)", len(records))
        return records

    async def _get_page(self, params: dict[str, str]) -> EndpointsList:
        try:
            async with self.session.get(ENDPOINTS_PATH, params=params) as response:
                if response.status != 200:
                    text = await response.text()
                    raise EndpointQueryError(
                        f"Failed to list endpoints: {response.status} {text}"
                    )
                data = await response.json()
        except aiohttp.ClientError as e:
            raise EndpointQueryError(f"Failed to reach Kubernetes API: {e}") from e

        try:
            return EndpointsList.model_validate(data)
        except ValidationError as e:
            raise EndpointQueryError(f"Unexpected endpoints response: {e}") from e
