"""Configuration model for the claim client."""

from __future__ import annotations

from dataclasses import dataclass

SESSION_TOKEN_KEY = "twitter_token"


@dataclass
class ClientConfig:
    """Complete claim client configuration."""

    # Client
    base_url: str = "http://localhost:3000"
    timeout: float | None = None  # seconds; None keeps the httpx default
    log_level: str = "info"

    # Explorer links
    token_explorer: str = "https://wow.xyz/{subject}"
    address_explorer: str = "https://basescan.org/address/{address}"

    # Session cache
    db_path: str = "~/.airdrop_claim/session.db"
    session_id: str = "default"
