"""Social profile models deserialized from the identity-exchange response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PublicMetrics:
    """Public counters attached to a Twitter profile."""

    followers_count: int = 0
    following_count: int = 0
    tweet_count: int = 0


@dataclass(frozen=True)
class SocialProfile:
    """A verified Twitter identity.

    ``raw`` holds the untouched ``profile`` payload from the backend so the
    stored profile always mirrors what the server returned.
    """

    id: str
    name: str
    username: str
    description: str | None = None
    profile_image_url: str | None = None
    public_metrics: PublicMetrics | None = None
    verified: bool | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> SocialProfile:
        """Build a profile from the ``{"data": {...}}`` shape.

        Raises KeyError/TypeError/ValueError on a malformed payload.
        """
        data = payload["data"]
        user_id = data["id"]
        if not isinstance(user_id, str) or not user_id:
            raise ValueError(f"invalid profile id: {user_id!r}")

        for key in ("name", "username"):
            if not isinstance(data[key], str):
                raise TypeError(f"invalid profile {key}: {data[key]!r}")

        metrics = None
        if m := data.get("public_metrics"):
            if not isinstance(m, dict):
                raise TypeError(f"invalid public_metrics: {m!r}")
            metrics = PublicMetrics(
                followers_count=int(m.get("followers_count", 0)),
                following_count=int(m.get("following_count", 0)),
                tweet_count=int(m.get("tweet_count", 0)),
            )

        return cls(
            id=user_id,
            name=data["name"],
            username=data["username"],
            description=data.get("description"),
            profile_image_url=data.get("profile_image_url"),
            public_metrics=metrics,
            verified=data.get("verified"),
            raw=payload,
        )
