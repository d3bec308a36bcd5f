"""Claim session state: error record, phases and immutable snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from airdrop_claim.models.profile import SocialProfile
from airdrop_claim.models.records import TransferReceipt


class ClaimPhase(str, Enum):
    """Where a claim session currently stands."""

    INIT = "init"
    RESOLVING_IDENTITY = "resolving_identity"
    IDENTITY_READY = "identity_ready"
    RESOLVING_ACCOUNT = "resolving_account"
    ACCOUNT_READY = "account_ready"
    DISPATCHING_TRANSFER = "dispatching_transfer"
    COMPLETE = "complete"
    ERROR = "error"


class DisplayState(str, Enum):
    """What the identity panel shows."""

    LOADING = "loading"
    ERROR = "error"
    PROFILE = "profile"


@dataclass(frozen=True)
class FlowError:
    """The single active error of a session."""

    kind: str  # "MissingTokenError", "AccountFetchError", "UnexpectedError", ...
    message: str


@dataclass(frozen=True)
class ClaimSnapshot:
    """Point-in-time copy of a controller's state, handed to listeners."""

    subject: str
    profile: SocialProfile | None = None
    address: str | None = None
    error: FlowError | None = None
    identity_busy: bool = False
    account_busy: bool = False
    transfer_busy: bool = False
    receipt: TransferReceipt | None = None
    started: bool = False
    ended: bool = False

    @property
    def transfer_sent(self) -> bool:
        return self.receipt is not None

    @property
    def can_resolve_account(self) -> bool:
        return (
            not self.ended
            and self.profile is not None
            and self.address is None
            and not self.account_busy
        )

    @property
    def can_send_airdrop(self) -> bool:
        return not self.ended and self.address is not None and not self.transfer_busy

    @property
    def display_state(self) -> DisplayState:
        if self.error is not None:
            return DisplayState.ERROR
        if self.profile is not None:
            return DisplayState.PROFILE
        return DisplayState.LOADING

    @property
    def phase(self) -> ClaimPhase:
        if self.identity_busy:
            return ClaimPhase.RESOLVING_IDENTITY
        if self.account_busy:
            return ClaimPhase.RESOLVING_ACCOUNT
        if self.transfer_busy:
            return ClaimPhase.DISPATCHING_TRANSFER
        if self.error is not None:
            return ClaimPhase.ERROR
        if self.transfer_sent:
            return ClaimPhase.COMPLETE
        if self.address is not None:
            return ClaimPhase.ACCOUNT_READY
        if self.profile is not None:
            return ClaimPhase.IDENTITY_READY
        return ClaimPhase.INIT
