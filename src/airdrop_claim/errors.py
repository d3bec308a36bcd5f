"""Claim flow error taxonomy.

Every step failure surfaces as one of these. The controller catches them and
keeps only the latest message; none of them escapes a step method.
"""

from __future__ import annotations

GENERIC_ERROR_MESSAGE = "Something went wrong"
UNEXPECTED_ERROR_KIND = "UnexpectedError"


class ClaimFlowError(Exception):
    """Base class for expected claim flow failures."""

    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return str(self)


class MissingTokenError(ClaimFlowError):
    """The landing request carried no claim token. Fatal for the session."""

    default_message = "No token provided"


class ProfileFetchError(ClaimFlowError):
    """The token could not be exchanged for a profile. Fatal for the session."""

    default_message = "Failed to fetch profile"


class AccountFetchError(ClaimFlowError):
    """The smart-account address could not be resolved. Retryable."""

    default_message = "Failed to fetch account"


class TransferDispatchError(ClaimFlowError):
    """The airdrop request was not accepted. Retryable."""

    default_message = "Failed to send airdrop"
