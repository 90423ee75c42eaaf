"""Shared setup and rendering for CLI commands."""

from __future__ import annotations

import random

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bankey.core.config import Config
from bankey.core.exceptions import ConfigurationError
from bankey.core.utils.logging import setup_logging
from bankey.financial.currency import CurrencyFormatter
from bankey.financial.models import AccountType
from bankey.services.simulated import SimulatedAccountService, SimulatedProfileService
from bankey.summary.errors import LoadError
from bankey.summary.loader import CompletionHandler, SummaryLoader
from bankey.summary.view_models import SummaryBundle

_TYPE_LABELS = {
    AccountType.BANKING: "Banking",
    AccountType.CREDIT_CARD: "Credit Card",
    AccountType.INVESTMENT: "Investment",
}

_TYPE_STYLES = {
    AccountType.BANKING: "cyan",
    AccountType.CREDIT_CARD: "orange3",
    AccountType.INVESTMENT: "purple",
}


def init_app(config_file: str | None, log_level: str | None) -> Config:
    """Load config and configure logging for a CLI invocation."""
    try:
        config = Config(config_file=config_file)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(config, level=log_level)
    return config


def pick_user_id(config: Config) -> str:
    """Choose the session user (demo policy: random from the configured pool)."""
    user_ids = config.get_list("summary.user_ids")
    if not user_ids:
        raise click.ClickException("summary.user_ids is empty")
    return random.choice(user_ids)


def build_loader(
    config: Config,
    console: Console,
    *,
    fail_profile: LoadError | None = None,
    fail_accounts: LoadError | None = None,
    on_complete: CompletionHandler | None = None,
) -> SummaryLoader:
    """Wire a SummaryLoader to the simulated services using *config*."""
    try:
        profile_service = SimulatedProfileService(
            delay=config.get_float("network.profile_delay"),
            fail_with=fail_profile,
        )
        account_service = SimulatedAccountService(
            delay=config.get_float("network.accounts_delay"),
            fail_with=fail_accounts,
        )
        placeholder_rows = config.get_int("summary.placeholder_rows", 10)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    def show_error(error: LoadError, title: str, message: str) -> None:
        console.print(f"[bold red]{title}[/]: {message}")

    return SummaryLoader(
        profile_service,
        account_service,
        formatter=CurrencyFormatter.from_config(config),
        greeting=config.get("summary.greeting", "Good morning"),
        placeholder_rows=placeholder_rows,
        on_error=show_error,
        on_complete=on_complete,
    )


def render_bundle(console: Console, bundle: SummaryBundle, formatter: CurrencyFormatter) -> None:
    """Print the greeting header and the account table."""
    header = bundle.header
    console.print(f"[bold]{header.welcome_message}, {header.name}[/]")
    console.print(f"[dim]{header.date_formatted}[/]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Account")
    table.add_column("Balance", justify="right")

    for row in bundle.accounts:
        sign, dollars, cents = formatter.balance_parts(row.balance)
        balance = Text()
        balance.append(sign, style="dim")
        balance.append(dollars, style="bold")
        balance.append(formatter.decimal_separator + cents, style="dim")
        table.add_row(
            Text(_TYPE_LABELS[row.account_type], style=_TYPE_STYLES[row.account_type]),
            row.account_name,
            balance,
        )
    console.print(table)
