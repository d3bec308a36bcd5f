"""Operation results returned by the claim controller and backend."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ActionResult:
    """Result of a user-initiated step (start, resolve, send)."""

    success: bool
    message: str


@dataclass(frozen=True)
class TransferReceipt:
    """Server acknowledgement of an airdrop dispatch.

    Only the HTTP status is checked; the body is not part of the contract.
    """

    subject: str
    address: str
    status_code: int
