"""View builder - turns claim snapshots into presentation-ready view models."""

from __future__ import annotations

from airdrop_claim.controller import CONFIRMATION_MESSAGE
from airdrop_claim.models.config import ClientConfig
from airdrop_claim.models.profile import SocialProfile
from airdrop_claim.models.state import ClaimSnapshot, DisplayState
from airdrop_claim.models.view import ButtonView, ClaimView, Link, ProfileView

TITLE = "Twitter Authentication Success"
PROFILE_LOADING = "Loading your profile details..."
ACCOUNT_LOADING = "Fetching your smart account address..."

RESOLVE_LABEL = "Claim Airdrop"
RESOLVE_BUSY_LABEL = "Fetching Account..."
SEND_LABEL = "Send to Address"
SEND_BUSY_LABEL = "Sending..."


def token_link(subject: str, cfg: ClientConfig) -> Link:
    return Link(label=subject, url=cfg.token_explorer.format(subject=subject))


def address_link(address: str, cfg: ClientConfig) -> Link:
    return Link(label=address, url=cfg.address_explorer.format(address=address))


def _profile_view(profile: SocialProfile) -> ProfileView:
    stats = []
    if m := profile.public_metrics:
        stats = [
            f"{m.followers_count} followers",
            f"{m.following_count} following",
            f"{m.tweet_count} tweets",
        ]
    return ProfileView(
        name=profile.name,
        handle=f"@{profile.username}",
        bio=profile.description or None,
        avatar_url=profile.profile_image_url or None,
        stats=stats,
        verified=bool(profile.verified),
    )


def build_claim_view(snapshot: ClaimSnapshot, cfg: ClientConfig) -> ClaimView:
    """Build the full claim page view for one snapshot.

    The identity panel shows exactly one of loading / error / profile. The
    resolve button is offered only while a profile exists without an address;
    the send button only once an address exists. Buttons are disabled while
    their own step is busy.
    """
    display = snapshot.display_state

    resolve_button = None
    if snapshot.profile is not None and snapshot.address is None:
        resolve_button = ButtonView(
            label=RESOLVE_BUSY_LABEL if snapshot.account_busy else RESOLVE_LABEL,
            enabled=snapshot.can_resolve_account,
        )

    account_link = None
    send_button = None
    if snapshot.address is not None:
        account_link = address_link(snapshot.address, cfg)
        send_button = ButtonView(
            label=SEND_BUSY_LABEL if snapshot.transfer_busy else SEND_LABEL,
            enabled=snapshot.can_send_airdrop,
        )

    return ClaimView(
        title=TITLE,
        token_link=token_link(snapshot.subject, cfg),
        phase=snapshot.phase.value,
        display_state=display.value,
        loading_message=PROFILE_LOADING if display == DisplayState.LOADING else None,
        error=snapshot.error.message if snapshot.error else None,
        profile=(
            _profile_view(snapshot.profile)
            if display == DisplayState.PROFILE and snapshot.profile
            else None
        ),
        resolve_button=resolve_button,
        account_loading_message=ACCOUNT_LOADING if snapshot.account_busy else None,
        account_link=account_link,
        send_button=send_button,
        confirmation=CONFIRMATION_MESSAGE if snapshot.transfer_sent else None,
    )
