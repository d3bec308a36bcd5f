"""Claim flow controller - the identity -> account -> airdrop state machine."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Iterator

from airdrop_claim.errors import (
    GENERIC_ERROR_MESSAGE,
    UNEXPECTED_ERROR_KIND,
    ClaimFlowError,
    MissingTokenError,
)
from airdrop_claim.interfaces.backend import ClaimBackend
from airdrop_claim.interfaces.cache import SessionCache
from airdrop_claim.interfaces.listener import StateListener
from airdrop_claim.models.config import SESSION_TOKEN_KEY
from airdrop_claim.models.profile import SocialProfile
from airdrop_claim.models.records import ActionResult
from airdrop_claim.models.state import ClaimPhase, ClaimSnapshot, FlowError

log = logging.getLogger(__name__)

CONFIRMATION_MESSAGE = "Airdrop sent successfully!"
SESSION_ENDED_MESSAGE = "Session ended"


class ClaimFlowController:
    """Owns one claim session and runs its three steps in order.

    1. start(): exchange the claim token for a Twitter profile
    2. resolve_account(): map the profile id to a smart-account address
    3. send_airdrop(): ask the server to transfer the token to that address

    Each step has its own busy flag and is refused while it is busy or while
    its prerequisite is missing. Failures never escape: they become the single
    active FlowError. After stop(), late completions are dropped and the state
    is frozen.
    """

    def __init__(
        self,
        backend: ClaimBackend,
        subject: str,
        token: str | None,
        cache: SessionCache | None = None,
    ) -> None:
        self._backend = backend
        self._cache = cache
        self._token = token
        self._state = ClaimSnapshot(subject=subject)
        self._listeners: list[StateListener] = []

    # ── State ──────────────────────────────────────────────

    def snapshot(self) -> ClaimSnapshot:
        return self._state

    @property
    def phase(self) -> ClaimPhase:
        return self._state.phase

    @property
    def ended(self) -> bool:
        return self._state.ended

    def add_listener(self, listener: StateListener) -> Callable[[], None]:
        """Subscribe to state changes. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def _update(self, **changes: Any) -> None:
        if self._state.ended:
            return
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                log.exception("State listener %r failed", listener)

    def _set_error(self, error: FlowError) -> None:
        log.warning("Claim %s: %s (%s)", self._state.subject, error.message, error.kind)
        self._update(error=error)

    @contextmanager
    def _busy(self, flag: str) -> Iterator[None]:
        self._update(**{flag: True})
        try:
            yield
        finally:
            self._update(**{flag: False})

    # ── Lifecycle ──────────────────────────────────────────

    async def start(self) -> ActionResult:
        """Resolve the identity behind the claim token. Runs once per session."""
        if self._state.ended:
            return ActionResult(success=False, message=SESSION_ENDED_MESSAGE)
        if self._state.started:
            log.warning("Claim %s already started", self._state.subject)
            return ActionResult(success=False, message="Session already started")
        self._update(started=True)

        token = self._token
        if not token:
            exc = MissingTokenError()
            self._set_error(FlowError(kind=exc.kind, message=exc.message))
            return ActionResult(success=False, message=exc.message)

        log.info("Resolving identity for claim %s", self._state.subject)
        return await self._run_step(
            "identity_busy",
            lambda: self._fetch_profile(token),
            lambda profile: self._update(profile=profile, error=None),
            "Profile loaded",
        )

    def stop(self) -> None:
        """End the session. Anything still in flight will be discarded."""
        if not self._state.ended:
            log.info("Claim %s session ended (phase=%s)", self._state.subject, self.phase.value)
            self._state = replace(self._state, ended=True)

    # ── Actions ────────────────────────────────────────────

    async def resolve_account(self) -> ActionResult:
        """Resolve the smart-account address of the verified profile."""
        state = self._state
        if not state.can_resolve_account or state.profile is None:
            return ActionResult(success=False, message="Account resolution is not available")

        user_id = state.profile.id
        log.info("Resolving smart account for user %s", user_id)
        return await self._run_step(
            "account_busy",
            lambda: self._backend.fetch_account(user_id),
            lambda account: self._update(address=account, error=None),
            "Smart account resolved",
        )

    async def send_airdrop(self) -> ActionResult:
        """Request the airdrop transfer to the resolved address."""
        state = self._state
        if not state.can_send_airdrop or state.address is None:
            return ActionResult(success=False, message="Airdrop dispatch is not available")

        subject, address = state.subject, state.address
        log.info("Dispatching airdrop of token %s to %s", subject, address)
        return await self._run_step(
            "transfer_busy",
            lambda: self._backend.send_airdrop(subject, address),
            lambda receipt: self._update(receipt=receipt, error=None),
            CONFIRMATION_MESSAGE,
        )

    # ── Internals ──────────────────────────────────────────

    async def _fetch_profile(self, token: str) -> SocialProfile:
        if self._cache is not None:
            try:
                await self._cache.set_item(SESSION_TOKEN_KEY, token)
            except Exception as exc:
                log.warning("Could not cache claim token: %s", exc)
        return await self._backend.fetch_profile(token)

    async def _run_step(
        self,
        busy_flag: str,
        call: Callable[[], Awaitable[Any]],
        on_success: Callable[[Any], None],
        success_message: str,
    ) -> ActionResult:
        with self._busy(busy_flag):
            try:
                result = await call()
            except ClaimFlowError as exc:
                if self._state.ended:
                    return ActionResult(success=False, message=SESSION_ENDED_MESSAGE)
                self._set_error(FlowError(kind=exc.kind, message=exc.message))
                return ActionResult(success=False, message=exc.message)
            except Exception:
                if self._state.ended:
                    log.debug("Discarding %s failure for ended session", busy_flag, exc_info=True)
                    return ActionResult(success=False, message=SESSION_ENDED_MESSAGE)
                log.error("Unexpected error during %s", busy_flag, exc_info=True)
                self._set_error(
                    FlowError(kind=UNEXPECTED_ERROR_KIND, message=GENERIC_ERROR_MESSAGE)
                )
                return ActionResult(success=False, message=GENERIC_ERROR_MESSAGE)

            if self._state.ended:
                log.debug("Discarding %s result for ended session", busy_flag)
                return ActionResult(success=False, message=SESSION_ENDED_MESSAGE)
            on_success(result)
            return ActionResult(success=True, message=success_message)
