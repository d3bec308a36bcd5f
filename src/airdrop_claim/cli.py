"""CLI entry point for the airdrop claim client."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from airdrop_claim.api.view import ACCOUNT_LOADING, SEND_BUSY_LABEL, build_claim_view
from airdrop_claim.backend.http import HttpClaimBackend
from airdrop_claim.config import load_config
from airdrop_claim.controller import ClaimFlowController
from airdrop_claim.models.config import SESSION_TOKEN_KEY, ClientConfig
from airdrop_claim.models.state import ClaimPhase, ClaimSnapshot
from airdrop_claim.models.view import ClaimView
from airdrop_claim.storage.session_cache import SQLiteSessionCache


def _open_cache(cfg: ClientConfig) -> SQLiteSessionCache:
    return SQLiteSessionCache(cfg.db_path, cfg.session_id)


def _log_level(cfg: ClientConfig, verbose: bool) -> int:
    """-v wins; otherwise the configured [client] log_level, INFO if unknown."""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(cfg.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def _render(view: ClaimView) -> None:
    """Print the identity panel and whatever account state exists."""
    if view.error:
        click.echo(f"Error: {view.error}", err=True)
    elif view.profile:
        p = view.profile
        click.echo(f"{p.name} ({p.handle}){' [verified]' if p.verified else ''}")
        if p.bio:
            click.echo(f"  {p.bio}")
        if p.stats:
            click.echo(f"  {' | '.join(p.stats)}")
    elif view.loading_message:
        click.echo(view.loading_message)

    if view.account_link:
        click.echo(f"Smart Account: {view.account_link.label}")
        click.echo(f"  {view.account_link.url}")


def _progress_printer():
    """Listener echoing progress notices once per phase change."""
    last: dict = {"phase": None}

    def _on_change(snapshot: ClaimSnapshot) -> None:
        if snapshot.phase == last["phase"]:
            return
        last["phase"] = snapshot.phase
        if snapshot.phase == ClaimPhase.RESOLVING_ACCOUNT:
            click.echo(ACCOUNT_LOADING)
        elif snapshot.phase == ClaimPhase.DISPATCHING_TRANSFER:
            click.echo(SEND_BUSY_LABEL)

    return _on_change


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """airdrop-claim - claim a token airdrop with your Twitter account."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    logging.basicConfig(
        level=_log_level(load_config(config_path), verbose),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Claim ──────────────────────────────────────────────


@cli.command()
@click.argument("subject")
@click.option("--token", default=None, help="One-time token from the Twitter login redirect")
@click.option("--resume", is_flag=True, help="Reuse the token cached by a previous run")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompts")
@click.pass_context
def claim(ctx: click.Context, subject: str, token: str | None, resume: bool, yes: bool) -> None:
    """Run the claim flow for token SUBJECT: profile, smart account, airdrop."""
    cfg = load_config(ctx.obj["config_path"])

    async def _claim() -> ClaimSnapshot:
        cache = _open_cache(cfg)
        await cache.initialize()
        backend = HttpClaimBackend(cfg.base_url, timeout=cfg.timeout)
        try:
            claim_token = token
            if claim_token is None and resume:
                claim_token = await cache.get_item(SESSION_TOKEN_KEY)
                if claim_token:
                    click.echo("Resuming with cached token")

            ctrl = ClaimFlowController(backend, subject, claim_token, cache=cache)
            ctrl.add_listener(_progress_printer())

            view = build_claim_view(ctrl.snapshot(), cfg)
            click.echo(view.title)
            click.echo(f"Token: {view.token_link.label} ({view.token_link.url})")
            click.echo(view.loading_message or "")

            await ctrl.start()
            _render(build_claim_view(ctrl.snapshot(), cfg))

            while ctrl.snapshot().can_resolve_account:
                if not yes and not click.confirm("Claim airdrop?", default=True):
                    break
                await ctrl.resolve_account()
                _render(build_claim_view(ctrl.snapshot(), cfg))
                if yes:
                    break

            while ctrl.snapshot().can_send_airdrop and not ctrl.snapshot().transfer_sent:
                if not yes and not click.confirm("Send to address?", default=True):
                    break
                result = await ctrl.send_airdrop()
                if result.success:
                    click.echo(result.message)
                else:
                    _render(build_claim_view(ctrl.snapshot(), cfg))
                if yes:
                    break

            snapshot = ctrl.snapshot()
            ctrl.stop()
            return snapshot
        finally:
            await backend.close()
            await cache.close()

    final = asyncio.run(_claim())
    if final.phase == ClaimPhase.ERROR:
        sys.exit(1)


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show client configuration."""
    cfg = load_config(ctx.obj["config_path"])
    click.echo(f"Base URL:          {cfg.base_url}")
    click.echo(f"Timeout:           {cfg.timeout if cfg.timeout is not None else '(httpx default)'}")
    click.echo(f"Token explorer:    {cfg.token_explorer}")
    click.echo(f"Address explorer:  {cfg.address_explorer}")
    click.echo(f"Cache path:        {cfg.db_path}")
    click.echo(f"Session:           {cfg.session_id}")


@cli.command("cached-token")
@click.pass_context
def cached_token(ctx: click.Context) -> None:
    """Print the claim token cached by the last session, if any."""
    cfg = load_config(ctx.obj["config_path"])

    async def _read() -> str | None:
        cache = _open_cache(cfg)
        await cache.initialize()
        try:
            return await cache.get_item(SESSION_TOKEN_KEY)
        finally:
            await cache.close()

    value = asyncio.run(_read())
    if value is None:
        click.echo("No cached token.", err=True)
        sys.exit(1)
    click.echo(value)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
