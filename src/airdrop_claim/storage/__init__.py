"""Session storage components."""

from airdrop_claim.storage.session_cache import MemorySessionCache, SQLiteSessionCache

__all__ = ["MemorySessionCache", "SQLiteSessionCache"]
