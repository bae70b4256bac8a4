"""CLI error handling helpers."""

import logging

import click

from recordkeep.domain.errors import ConflictError, DomainError, NotFoundError

logger = logging.getLogger(__name__)

# Checked in order; anything else (validation, plain ValueError) exits with 1
EXIT_CODES: list[tuple[type[DomainError], int]] = [
    (NotFoundError, 3),
    (ConflictError, 4),
]


def exit_code_for(error: Exception) -> int:
    """Return the process exit code for a domain error."""
    for error_type, code in EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return 1


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error on stderr and exit with its exit code."""
    logger.debug("Command %s failed with %s", ctx.info_name, type(error).__name__)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(exit_code_for(error))
