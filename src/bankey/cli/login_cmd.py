"""bankey login — interactive session: login, onboarding, summary, logout."""

from __future__ import annotations

import asyncio

import click

ONBOARDING_PAGES = [
    "Bankey is faster, easier to use, and has a brand new look and feel.",
    "Move your money around the world quickly and securely.",
    "Learn more at www.bankey.com.",
]

_ACTIONS = click.Choice(["refresh", "logout", "quit"])


@click.command()
@click.option("--attempts", default=3, show_default=True, help="Failed logins allowed before giving up.")
@click.pass_obj
def login(config, attempts: int) -> None:
    """Sign in and browse your accounts in the terminal."""
    from rich.console import Console

    from bankey.app.coordinator import AppCoordinator, Screen
    from bankey.auth.login import authenticate
    from bankey.cli.common import build_loader, pick_user_id, render_bundle
    from bankey.core.exceptions import AuthenticationError
    from bankey.summary.state import Loaded

    console = Console()
    coordinator = AppCoordinator()
    loader = build_loader(config, console)

    def run_main_screen(on_logout) -> bool:
        """Show the summary until the user logs out (False) or quits (True)."""
        while True:
            result = asyncio.run(loader.load(pick_user_id(config)))
            if isinstance(result, Loaded):
                render_bundle(console, result.bundle, loader.formatter)
            action = click.prompt("Action", type=_ACTIONS, default="quit")
            if action == "logout":
                on_logout()
                return False
            if action == "quit":
                return True

    failures = 0
    while True:
        click.echo("Bankey - Your premium source for all things banking!")
        username = click.prompt("Username", default="", show_default=False)
        password = click.prompt("Password", default="", show_default=False, hide_input=True)
        try:
            authenticate(
                username,
                password,
                expected_username=str(config.get("auth.username", "Kevin")),
                expected_password=str(config.get("auth.password", "Welcome")),
            )
        except AuthenticationError as e:
            click.echo(str(e))
            failures += 1
            if failures >= attempts:
                raise click.ClickException("Too many failed login attempts") from e
            continue

        failures = 0
        if coordinator.did_login() is Screen.ONBOARDING:
            for page in ONBOARDING_PAGES:
                click.echo(page)
            coordinator.did_finish_onboarding()

        if run_main_screen(on_logout=coordinator.did_logout):
            return
        click.echo("Logged out.")
