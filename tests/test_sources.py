import asyncio
import json
from pathlib import Path

import httpx
import pytest

from itemstash.loaders.sources import SourceLoader, directory_locations

BASE = "https://api.example.com/en"


def _loader(handler) -> SourceLoader:
    return SourceLoader(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio()
async def test_fetch_all_returns_records_per_source():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"id": request.url.path}])

    batch = await _loader(handler).fetch_all({"skins": f"{BASE}/skins.json", "crates": f"{BASE}/crates.json"})
    assert batch.documents == {
        "skins": [{"id": "/en/skins.json"}],
        "crates": [{"id": "/en/crates.json"}],
    }
    assert batch.empty_sources == ()


@pytest.mark.asyncio()
async def test_failures_degrade_to_empty_without_affecting_others():
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.endswith("missing.json"):
            return httpx.Response(404)
        if path.endswith("html.json"):
            return httpx.Response(200, text="<html></html>", headers={"content-type": "text/html"})
        if path.endswith("broken.json"):
            return httpx.Response(200, content=b"[{", headers={"content-type": "application/json"})
        if path.endswith("object.json"):
            return httpx.Response(200, json={"not": "an array"})
        if path.endswith("offline.json"):
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json=[{"id": "ok"}])

    locations = {
        name: f"{BASE}/{name}.json"
        for name in ("missing", "html", "broken", "object", "offline", "good")
    }
    batch = await _loader(handler).fetch_all(locations)

    assert batch.documents["good"] == [{"id": "ok"}]
    for name in ("missing", "html", "broken", "object", "offline"):
        assert batch.documents[name] == []
    assert set(batch.empty_sources) == {"missing", "html", "broken", "object", "offline"}


@pytest.mark.asyncio()
async def test_sources_are_requested_concurrently():
    names = ("skins", "crates", "collections")
    arrived: list[str] = []
    all_arrived = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        arrived.append(request.url.path)
        if len(arrived) == len(names):
            all_arrived.set()
        await all_arrived.wait()
        return httpx.Response(200, json=[])

    locations = {name: f"{BASE}/{name}.json" for name in names}
    batch = await asyncio.wait_for(_loader(handler).fetch_all(locations), timeout=5)
    assert len(arrived) == len(names)
    assert batch.empty_sources == ()


@pytest.mark.asyncio()
async def test_local_files_and_missing_files(tmp_path: Path):
    (tmp_path / "skins.json").write_text(json.dumps([{"id": "1", "name": "A"}]), encoding="utf-8")
    (tmp_path / "crates.json").write_text("not json", encoding="utf-8")
    locations = directory_locations(
        tmp_path,
        {"skins": "skins.json", "crates": "crates.json", "tools": "tools.json"},
    )
    locations["agents"] = (tmp_path / "skins.json").as_uri()

    batch = await SourceLoader().fetch_all(locations)

    assert batch.documents["skins"] == [{"id": "1", "name": "A"}]
    assert batch.documents["agents"] == [{"id": "1", "name": "A"}]
    assert batch.documents["crates"] == []
    assert batch.documents["tools"] == []
    assert set(batch.empty_sources) == {"crates", "tools"}


@pytest.mark.asyncio()
async def test_unexpected_parse_failure_only_empties_its_source(tmp_path: Path):
    depth = 100_000
    (tmp_path / "deep.json").write_text("[" * depth + "]" * depth, encoding="utf-8")
    (tmp_path / "ok.json").write_text(json.dumps([{"id": "1"}]), encoding="utf-8")
    locations = directory_locations(tmp_path, {"deep": "deep.json", "ok": "ok.json"})

    batch = await SourceLoader().fetch_all(locations)

    assert batch.documents == {"deep": [], "ok": [{"id": "1"}]}
    assert batch.empty_sources == ("deep",)
