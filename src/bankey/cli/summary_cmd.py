"""bankey summary — run one load cycle and render it."""

from __future__ import annotations

import asyncio

import click

from bankey.summary.errors import LoadError

_ERROR_CHOICES = click.Choice([e.value for e in LoadError])


@click.command()
@click.option("--user-id", default=None, help="User to load (default: random from summary.user_ids).")
@click.option("--fail-profile", type=_ERROR_CHOICES, default=None, help="Force the profile fetch to fail.")
@click.option("--fail-accounts", type=_ERROR_CHOICES, default=None, help="Force the accounts fetch to fail.")
@click.pass_context
def summary(ctx: click.Context, user_id: str | None, fail_profile: str | None, fail_accounts: str | None) -> None:
    """Load and show the account summary for a user."""
    from rich.console import Console

    from bankey.cli.common import build_loader, pick_user_id, render_bundle
    from bankey.summary.state import Loaded

    config = ctx.obj
    console = Console()
    loader = build_loader(
        config,
        console,
        fail_profile=LoadError(fail_profile) if fail_profile else None,
        fail_accounts=LoadError(fail_accounts) if fail_accounts else None,
    )

    result = asyncio.run(loader.load(user_id or pick_user_id(config)))
    if not isinstance(result, Loaded):
        ctx.exit(1)
    render_bundle(console, result.bundle, loader.formatter)
