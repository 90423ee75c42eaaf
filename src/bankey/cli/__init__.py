"""Bankey CLI — entry point for the format, summary and login commands."""

import click

from bankey import __version__


@click.group()
@click.version_option(version=__version__, package_name="bankey")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("--log-level", default=None, help="Override logging.level (DEBUG, INFO, WARNING, ERROR).")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """Bankey — account summary demo."""
    from bankey.cli.common import init_app

    ctx.obj = init_app(config_file, log_level)


# Register subcommands (lazy imports keep startup fast)
from .format_cmd import format_amount
from .login_cmd import login
from .summary_cmd import summary

main.add_command(format_amount)
main.add_command(summary)
main.add_command(login)
