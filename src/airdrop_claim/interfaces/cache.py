"""SessionCache protocol - best-effort key-value store scoped to one session."""

from __future__ import annotations

from typing import Protocol


class SessionCache(Protocol):
    """Stand-in for browser session storage."""

    async def set_item(self, key: str, value: str) -> None:
        ...

    async def get_item(self, key: str) -> str | None:
        ...

    async def remove_item(self, key: str) -> None:
        ...
