"""bankey format — show how an amount renders as a balance."""

from __future__ import annotations

import click


@click.command("format")
@click.argument("amount")
@click.pass_obj
def format_amount(config, amount: str) -> None:
    """Format AMOUNT as a currency string, e.g. 929466.23 -> $929,466.23."""
    from bankey.financial.currency import CurrencyFormatter

    formatter = CurrencyFormatter.from_config(config)
    try:
        click.echo(formatter.dollars_formatted(amount))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="AMOUNT") from e
