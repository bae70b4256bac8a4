"""Ledger commands."""

import click

from recordkeep.cli.error_handling import handle_domain_error
from recordkeep.domain.account import AccountLedger, AccountPolicy
from recordkeep.domain.errors import DomainError
from recordkeep.domain.processing import ProcessorKind, get_processor
from recordkeep.domain.transaction import TransactionService, new_transaction
from recordkeep.utils.amount_parser import parse_amount
from recordkeep.utils.date_parser import parse_timestamp


@click.group()
def ledger_group():
    """Apply transactions to an account ledger."""
    pass


@ledger_group.command("run")
@click.argument("amounts", nargs=-1, required=True, metavar="AMOUNT...")
@click.option("--account", default="ACC-001", show_default=True, help="Account number")
@click.option(
    "--balance",
    default="1000",
    show_default=True,
    envvar="RECORDKEEP_OPENING_BALANCE",
    help="Opening balance",
)
@click.option(
    "--policy",
    type=click.Choice([p.value for p in AccountPolicy]),
    default=AccountPolicy.OVERDRAFT_CHECKED.value,
    show_default=True,
    help="Balance policy",
)
@click.option(
    "--processor",
    type=click.Choice([k.value for k in ProcessorKind]),
    default=ProcessorKind.BANK_TRANSFER.value,
    show_default=True,
    help="Payment channel used to process every transaction",
)
@click.option("--category", default="General", show_default=True, help="Category label")
@click.option(
    "--date",
    "when",
    default="now",
    show_default=True,
    help="Transaction time (YYYY-MM-DD or relative like 'today', '2 days ago')",
)
@click.pass_context
def run_ledger(
    ctx,
    amounts: tuple[str, ...],
    account: str,
    balance: str,
    policy: str,
    processor: str,
    category: str,
    when: str,
):
    """Apply AMOUNT... in order to a fresh account ledger.

    Use "--" before negative amounts (credits).

    Examples:
        recordkeep ledger run 100 250 900
        recordkeep ledger run --policy standard --balance 50 -- 80 -20
        recordkeep ledger run --processor momo --category Groceries 12.50
    """
    try:
        timestamp = parse_timestamp(when)
        parsed = [parse_amount(a) for a in amounts]
        ledger = AccountLedger(account, parse_amount(balance), AccountPolicy(policy))
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    channel = get_processor(processor)
    service = TransactionService()

    click.echo(f"Account {ledger.account_number} ({ledger.policy.value}): opening balance {ledger.balance}")
    for amount in parsed:
        transaction = new_transaction(amount, category, timestamp=timestamp)
        click.echo(channel.describe(transaction))
        result = service.submit(transaction, channel, ledger)
        if result.refused:
            click.echo(f"  Refused: insufficient funds (balance {result.balance}, amount {result.amount})")
        else:
            click.echo(f"  Applied: new balance {result.balance}")

    click.echo(f"Final balance: {ledger.balance}")
    click.echo(f"Stored transactions: {service.count()}")


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
