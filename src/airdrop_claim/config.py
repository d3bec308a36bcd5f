"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from airdrop_claim.models.config import ClientConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "AIRDROP_CLAIM_",
) -> ClientConfig:
    """Load client configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (AIRDROP_CLAIM_BASE_URL, etc.)
        2. TOML config file
        3. Defaults from ClientConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = ClientConfig()

    # ── Client section ─────────────────────────────────────
    client = raw.get("client", {})
    if v := client.get("base_url"):
        cfg.base_url = str(v)
    if v := client.get("timeout"):
        cfg.timeout = float(v)
    if v := client.get("log_level"):
        cfg.log_level = str(v)

    # ── Links section ──────────────────────────────────────
    links = raw.get("links", {})
    if v := links.get("token_explorer"):
        cfg.token_explorer = str(v)
    if v := links.get("address_explorer"):
        cfg.address_explorer = str(v)

    # ── Cache section ──────────────────────────────────────
    cache = raw.get("cache", {})
    if v := cache.get("db_path"):
        cfg.db_path = str(v)
    if v := cache.get("session_id"):
        cfg.session_id = str(v)

    # ── Environment variable overrides (highest priority) ──
    if url := os.environ.get(f"{env_prefix}BASE_URL"):
        cfg.base_url = url
    if timeout := os.environ.get(f"{env_prefix}TIMEOUT"):
        cfg.timeout = float(timeout)
    if db_path := os.environ.get(f"{env_prefix}CACHE_PATH"):
        cfg.db_path = db_path
    if session_id := os.environ.get(f"{env_prefix}SESSION_ID"):
        cfg.session_id = session_id

    # Expand ~ in paths
    if cfg.db_path != ":memory:":
        cfg.db_path = str(Path(cfg.db_path).expanduser())

    return cfg
