"""Configuration models for itemstash."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Mapping

SOURCE_FILES: Mapping[str, str] = {
    "skins": "skins.json",
    "crates": "crates.json",
    "collections": "collections.json",
    "agents": "agents.json",
    "stickers": "stickers.json",
    "patches": "patches.json",
    "graffiti": "graffiti.json",
    "music_kits": "music_kits.json",
    "tools": "tools.json",
    "keychains": "keychains.json",
}

DEFAULT_BASE_URL = "https://bymykel.github.io/CSGO-API/api"


@dataclass(slots=True)
class SourceConfig:
    """Where each catalog document is fetched from."""

    base_url: str = DEFAULT_BASE_URL
    language: str = "en"
    overrides: Mapping[str, str] = field(default_factory=dict)

    def locations(self) -> dict[str, str]:
        base = self.base_url.rstrip("/")
        return {
            name: self.overrides.get(name) or f"{base}/{self.language}/{filename}"
            for name, filename in SOURCE_FILES.items()
        }


@dataclass(slots=True)
class HttpConfig:
    timeout_seconds: float = 15.0
    follow_redirects: bool = True
    user_agent: str = "itemstash"


@dataclass(slots=True)
class StashConfig:
    """Top-level configuration container."""

    sources: SourceConfig = field(default_factory=SourceConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    log_level: str = "INFO"
    rng_seed: int | None = None

    @classmethod
    def from_env(cls) -> "StashConfig":
        """Create config from environment variables prefixed with ITEMSTASH_."""
        prefix = "ITEMSTASH_"
        sources = SourceConfig(
            base_url=os.getenv(f"{prefix}BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
            language=os.getenv(f"{prefix}LANGUAGE", "en") or "en",
            overrides=_parse_overrides(os.getenv(f"{prefix}SOURCE_OVERRIDES")),
        )
        http = HttpConfig(
            timeout_seconds=float(os.getenv(f"{prefix}HTTP_TIMEOUT", "15")),
            follow_redirects=os.getenv(f"{prefix}HTTP_FOLLOW_REDIRECTS", "true").lower()
            in {"1", "true", "yes"},
            user_agent=os.getenv(f"{prefix}USER_AGENT", "itemstash") or "itemstash",
        )
        return cls(
            sources=sources,
            http=http,
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "INFO").upper(),
            rng_seed=(
                int(os.getenv(f"{prefix}RNG_SEED")) if os.getenv(f"{prefix}RNG_SEED") else None
            ),
        )


def _parse_overrides(raw: str | None) -> Mapping[str, str]:
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid JSON for ITEMSTASH_SOURCE_OVERRIDES") from exc
    if not isinstance(data, dict):
        raise ValueError("ITEMSTASH_SOURCE_OVERRIDES must be a JSON object")
    unknown = set(data) - set(SOURCE_FILES)
    if unknown:
        raise ValueError(f"Unknown sources in ITEMSTASH_SOURCE_OVERRIDES: {sorted(unknown)}")
    return {str(k): str(v) for k, v in data.items()}
