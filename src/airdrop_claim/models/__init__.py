"""Data models for the airdrop claim client."""

from airdrop_claim.models.profile import PublicMetrics, SocialProfile
from airdrop_claim.models.records import ActionResult, TransferReceipt
from airdrop_claim.models.state import ClaimPhase, ClaimSnapshot, DisplayState, FlowError
from airdrop_claim.models.config import ClientConfig, SESSION_TOKEN_KEY
from airdrop_claim.models.view import ButtonView, ClaimView, Link, ProfileView

__all__ = [
    "PublicMetrics", "SocialProfile",
    "ActionResult", "TransferReceipt",
    "ClaimPhase", "ClaimSnapshot", "DisplayState", "FlowError",
    "ClientConfig", "SESSION_TOKEN_KEY",
    "ButtonView", "ClaimView", "Link", "ProfileView",
]
