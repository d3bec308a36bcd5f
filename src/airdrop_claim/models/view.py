"""View models built from claim snapshots for any presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Link:
    label: str
    url: str


@dataclass(frozen=True)
class ProfileView:
    """Profile card contents."""

    name: str
    handle: str  # "@username"
    bio: str | None = None
    avatar_url: str | None = None
    stats: list[str] = field(default_factory=list)  # "12 followers", ...
    verified: bool = False


@dataclass(frozen=True)
class ButtonView:
    label: str
    enabled: bool


@dataclass(frozen=True)
class ClaimView:
    """Everything a frontend needs to render a claim session."""

    title: str
    token_link: Link
    phase: str
    display_state: str  # "loading", "error", "profile"
    loading_message: str | None = None
    error: str | None = None
    profile: ProfileView | None = None
    resolve_button: ButtonView | None = None
    account_loading_message: str | None = None
    account_link: Link | None = None
    send_button: ButtonView | None = None
    confirmation: str | None = None
