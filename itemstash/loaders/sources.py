"""Fetch catalog documents concurrently, degrading failures to empty arrays."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
from urllib.parse import unquote, urlparse

import httpx

from ..config import HttpConfig

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass(slots=True)
class SourceResult:
    name: str
    location: str
    records: list[Any] = field(default_factory=list)
    ok: bool = True


@dataclass(slots=True)
class SourceBatch:
    results: dict[str, SourceResult] = field(default_factory=dict)

    @property
    def documents(self) -> dict[str, list[Any]]:
        return {name: result.records for name, result in self.results.items()}

    @property
    def empty_sources(self) -> tuple[str, ...]:
        return tuple(name for name, result in self.results.items() if not result.ok)


class SourceLoader:
    """Retrieve every location once; a failed location yields an empty list.

    Locations may be ``http(s)://`` URLs, ``file://`` URLs or plain paths.
    """

    def __init__(
        self,
        config: HttpConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpConfig()
        self._transport = transport

    async def fetch_all(self, locations: Mapping[str, str]) -> SourceBatch:
        names = list(locations)
        async with self._client() as client:
            results = await asyncio.gather(
                *(self.fetch(client, name, locations[name]) for name in names)
            )
        return SourceBatch(results=dict(zip(names, results)))

    async def fetch(self, client: httpx.AsyncClient, name: str, location: str) -> SourceResult:
        try:
            if urlparse(location).scheme in {"http", "https"}:
                records = await self._fetch_http(client, location)
            else:
                records = await asyncio.to_thread(self._read_file, location)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, OSError, ValueError) as exc:
            logger.error("Error fetching or parsing %s: %s", location, exc)
            return SourceResult(name=name, location=location, ok=False)
        except Exception:
            logger.exception("Unexpected error while loading %s.", location)
            return SourceResult(name=name, location=location, ok=False)

        if records is None:
            return SourceResult(name=name, location=location, ok=False)
        if not isinstance(records, list):
            logger.warning("Payload from %s is not a JSON array, skipping.", location)
            return SourceResult(name=name, location=location, ok=False)
        logger.debug("Fetched %s records from %s.", len(records), location)
        return SourceResult(name=name, location=location, records=records)

    async def _fetch_http(self, client: httpx.AsyncClient, url: str) -> Any:
        response = await client.get(url)
        if not response.is_success:
            logger.warning(
                "Could not find %s (HTTP %s), will be treated as an empty category.",
                url,
                response.status_code,
            )
            return None
        content_type = response.headers.get("content-type", "")
        if JSON_CONTENT_TYPE not in content_type.lower():
            logger.warning("Response from %s was not JSON, skipping.", url)
            return None
        return response.json()

    @staticmethod
    def _read_file(location: str) -> Any:
        parsed = urlparse(location)
        path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(location)
        if not path.is_file():
            logger.warning("Could not find %s, will be treated as an empty category.", location)
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            follow_redirects=self._config.follow_redirects,
            headers={"User-Agent": self._config.user_agent},
            transport=self._transport,
        )


def directory_locations(directory: str | Path, names: Mapping[str, str]) -> dict[str, str]:
    """Map source names to files inside ``directory`` (e.g. a local API mirror)."""
    root = Path(directory)
    return {name: str(root / filename) for name, filename in names.items()}
