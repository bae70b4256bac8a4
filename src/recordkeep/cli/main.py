"""Main CLI entry point."""

import click

from recordkeep.cli.commands import ledger
from recordkeep.config.logging import configure_logging


@click.group()
@click.option(
    "--verbose",
    is_flag=True,
    envvar="RECORDKEEP_VERBOSE",
    help="Enable debug logging on stderr",
)
@click.option(
    "--log-json",
    is_flag=True,
    envvar="RECORDKEEP_LOG_JSON",
    help="Emit log records as JSON lines",
)
@click.pass_context
def cli(ctx, verbose: bool, log_json: bool):
    """Recordkeep - in-memory ledgers, stores and lookup indices.

    Every command works on state that lives only for the duration of the
    command.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose=verbose, log_json=log_json)


# Register all commands
ledger.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
