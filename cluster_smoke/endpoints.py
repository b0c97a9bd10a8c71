"""Listing of endpoint records for operator display."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from cluster_smoke.backends.networking.base import EndpointSource
from cluster_smoke.models.endpoints import EndpointRecord

log = logging.getLogger(__name__)

ROW_FORMAT = "{:<50}{:<50}{:<20}"


@dataclass(frozen=True, kw_only=True)
class EndpointRow:
    """Display row for one endpoint record."""

    name: str
    ips: Sequence[str]
    ports: Sequence[int]


def flatten_record(record: EndpointRecord) -> EndpointRow:
    """Collect addresses and ports of all subsets, in iteration order."""
    ips = [address.ip for subset in record.subsets for address in subset.addresses]
    ports = [port.port for subset in record.subsets for port in subset.ports]
    return EndpointRow(name=record.name, ips=ips, ports=ports)


def format_cell(values: Sequence[object]) -> str:
    """Render a collection as ``[a, b]``, or an empty string when empty."""
    if not values:
        return ""
    return "[" + ", ".join(str(value) for value in values) + "]"


def format_endpoint_table(rows: Sequence[EndpointRow]) -> str:
    """Render rows as a fixed-width table with a header line."""
    lines = [ROW_FORMAT.format("Name", "IP Addresses", "Ports")]
    lines.extend(
        ROW_FORMAT.format(row.name, format_cell(row.ips), format_cell(row.ports))
        for row in rows
    )
    return "\n".join(lines)


@dataclass(frozen=True, kw_only=True)
class EndpointLister:
    """Lists endpoint records from a networking source, sorted by name."""

    source: EndpointSource
    query_timeout: float | None = None

    async def list_endpoints(self) -> Sequence[EndpointRow]:
        """Query all records and return one display row per record.

        Raises:
            EndpointQueryError: If the source query fails
            TimeoutError: If the query exceeds ``query_timeout``

        """
        async with asyncio.timeout(self.query_timeout):
            records = await self.source.list_endpoints()

        log.debug("Formatting %d endpoint record(s)", len(records))
        return [
            flatten_record(record)
            for record in sorted(records, key=lambda record: record.name)
        ]
