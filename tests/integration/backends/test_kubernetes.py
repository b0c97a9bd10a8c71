"""Integration tests for the Kubernetes endpoint source."""

from collections.abc import AsyncGenerator
from pathlib import Path

import aiohttp
import pytest
from aioresponses import aioresponses as aioresponses_cls
from pydantic import SecretStr
from yarl import URL

from cluster_smoke.backends.networking.base import EndpointQueryError
from cluster_smoke.backends.networking.kubernetes import (
    KubernetesConfig,
    KubernetesEndpointSource,
)
from cluster_smoke.endpoints import EndpointLister, EndpointRow
from cluster_smoke.testing.kubernetes.payloads import (
    endpoint_subset,
    endpoints,
    endpoints_list,
)

API_BASE_URL = "https://k8s.test:6443/"
ENDPOINTS_URL = f"{API_BASE_URL}api/v1/endpoints"
FIRST_PAGE_URL = f"{ENDPOINTS_URL}?limit=2"
SECOND_PAGE_URL = f"{ENDPOINTS_URL}?continue=page-2&limit=2"


@pytest.fixture
def config() -> KubernetesConfig:
    """Create test configuration."""
    return KubernetesConfig(
        api_base_url=API_BASE_URL,
        token=SecretStr("k8s-token-123"),
        page_size=2,
    )


@pytest.fixture
async def source(
    config: KubernetesConfig, aioresponses: aioresponses_cls
) -> AsyncGenerator[KubernetesEndpointSource, None]:
    """Create source with managed session."""
    async with KubernetesEndpointSource.from_config(config) as impl:
        yield impl


class TestListEndpoints:
    """Tests for list_endpoints."""

    async def test_parses_single_page(
        self,
        source: KubernetesEndpointSource,
        aioresponses: aioresponses_cls,
    ) -> None:
        """Parses records from a response without a continue token."""
        aioresponses.get(
            FIRST_PAGE_URL,
            status=200,
            payload=endpoints_list(
                items=[
                    endpoints(
                        name="kube-dns",
                        namespace="kube-system",
                        subsets=[
                            endpoint_subset(
                                ips=["10.244.0.2", "10.244.0.3"], ports=[53, 9153]
                            )
                        ],
                    ),
                    endpoints(name="headless", subsets=[]),
                ]
            ),
        )

        records = await source.list_endpoints()

        assert [record.name for record in records] == ["kube-dns", "headless"]
        assert records[0].metadata.namespace == "kube-system"
        assert [a.ip for a in records[0].subsets[0].addresses] == [
            "10.244.0.2",
            "10.244.0.3",
        ]
        assert [p.port for p in records[0].subsets[0].ports] == [53, 9153]
        assert records[1].subsets == []

    async def test_follows_continue_tokens(
        self,
        source: KubernetesEndpointSource,
        aioresponses: aioresponses_cls,
    ) -> None:
        """Requests further pages until no continue token is returned."""
        aioresponses.get(
            FIRST_PAGE_URL,
            status=200,
            payload=endpoints_list(
                items=[endpoints(name="a"), endpoints(name="b")],
                continue_token="page-2",
            ),
        )
        aioresponses.get(
            SECOND_PAGE_URL,
            status=200,
            payload=endpoints_list(items=[endpoints(name="c")]),
        )

        records = await source.list_endpoints()

        assert [record.name for record in records] == ["a", "b", "c"]
        assert len(aioresponses.requests[("GET", URL(FIRST_PAGE_URL))]) == 1
        assert len(aioresponses.requests[("GET", URL(SECOND_PAGE_URL))]) == 1

    async def test_raises_on_error_status(
        self,
        source: KubernetesEndpointSource,
        aioresponses: aioresponses_cls,
    ) -> None:
        """Non-200 responses raise EndpointQueryError."""
        aioresponses.get(FIRST_PAGE_URL, status=403, body="forbidden")

        with pytest.raises(EndpointQueryError, match="403 forbidden"):
            await source.list_endpoints()

    async def test_raises_on_connection_error(
        self,
        source: KubernetesEndpointSource,
        aioresponses: aioresponses_cls,
    ) -> None:
        """Transport errors raise EndpointQueryError."""
        aioresponses.get(
            FIRST_PAGE_URL, exception=aiohttp.ClientConnectionError("no route")
        )

        with pytest.raises(EndpointQueryError, match="no route"):
            await source.list_endpoints()

    async def test_raises_on_malformed_payload(
        self,
        source: KubernetesEndpointSource,
        aioresponses: aioresponses_cls,
    ) -> None:
        """A 200 response without valid records raises EndpointQueryError."""
        aioresponses.get(
            FIRST_PAGE_URL,
            status=200,
            payload={"items": [{"metadata": {"namespace": "default"}}]},
        )

        with pytest.raises(EndpointQueryError, match="Unexpected endpoints response"):
            await source.list_endpoints()

    async def test_lister_sorts_and_flattens(
        self,
        source: KubernetesEndpointSource,
        aioresponses: aioresponses_cls,
    ) -> None:
        """Lister output over the API is sorted with flattened subsets."""
        aioresponses.get(
            FIRST_PAGE_URL,
            status=200,
            payload=endpoints_list(
                items=[
                    endpoints(name="web", subsets=[endpoint_subset(ips=["10.0.0.9"])]),
                    endpoints(name="api", subsets=[]),
                ]
            ),
        )

        rows = await EndpointLister(source=source).list_endpoints()

        assert rows == [
            EndpointRow(name="api", ips=[], ports=[]),
            EndpointRow(name="web", ips=["10.0.0.9"], ports=[8080]),
        ]


class TestBearerToken:
    """Tests for KubernetesConfig.bearer_token."""

    def test_prefers_explicit_token(self, tmp_path: Path) -> None:
        """Explicit token wins over the token file."""
        token_file = tmp_path / "token"
        token_file.write_text("from-file\n")

        config = KubernetesConfig(token=SecretStr("explicit"), token_file=token_file)

        assert config.bearer_token() == "explicit"

    def test_reads_token_file(self, tmp_path: Path) -> None:
        """Reads and strips the token file."""
        token_file = tmp_path / "token"
        token_file.write_text("from-file\n")

        config = KubernetesConfig(token_file=token_file)

        assert config.bearer_token() == "from-file"

    def test_no_token(self) -> None:
        """Without token settings there is no bearer token."""
        assert KubernetesConfig().bearer_token() is None


class TestFromConfig:
    """Tests for KubernetesEndpointSource.from_config."""

    async def test_missing_token_file_raises_query_error(self, tmp_path: Path) -> None:
        """An unreadable token file is reported as a query failure."""
        config = KubernetesConfig(
            api_base_url=API_BASE_URL, token_file=tmp_path / "missing-token"
        )

        with pytest.raises(EndpointQueryError, match="missing-token"):
            async with KubernetesEndpointSource.from_config(config):
                pass

    async def test_missing_ca_file_raises_query_error(self, tmp_path: Path) -> None:
        """An unreadable CA bundle is reported as a query failure."""
        config = KubernetesConfig(
            api_base_url=API_BASE_URL, ca_file=tmp_path / "missing-ca.crt"
        )

        with pytest.raises(EndpointQueryError, match="credentials"):
            async with KubernetesEndpointSource.from_config(config):
                pass
