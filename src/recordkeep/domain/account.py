"""Account ledger with balance policies."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union
from uuid import UUID

from recordkeep.domain.entities import AccountSnapshot, Transaction
from recordkeep.domain.errors import ValidationError
from recordkeep.utils.amount_parser import to_decimal

logger = logging.getLogger(__name__)


class AccountPolicy(Enum):
    """How an account treats transactions larger than its balance."""

    STANDARD = "standard"
    OVERDRAFT_CHECKED = "overdraft"

    def refuses(self, balance: Decimal, amount: Decimal) -> bool:
        """Return True if applying ``amount`` to ``balance`` must be refused."""
        if self is AccountPolicy.OVERDRAFT_CHECKED:
            return amount > balance
        return False


@dataclass(frozen=True)
class AppliedTransaction:
    """A transaction was deducted from the balance."""

    transaction_id: UUID
    amount: Decimal
    balance: Decimal

    @property
    def refused(self) -> bool:
        return False


@dataclass(frozen=True)
class OverdraftRefusal:
    """A transaction was refused because it would overdraw the account.

    This is an expected business outcome, not an error; the balance is
    unchanged.
    """

    transaction_id: UUID
    amount: Decimal
    balance: Decimal

    @property
    def refused(self) -> bool:
        return True

    @property
    def shortfall(self) -> Decimal:
        return self.amount - self.balance


ApplyResult = Union[AppliedTransaction, OverdraftRefusal]


class AccountLedger:
    """Single account balance mutated only through ``apply``."""

    def __init__(
        self,
        account_number: str,
        opening_balance: Decimal | int | str = Decimal("0"),
        policy: AccountPolicy = AccountPolicy.STANDARD,
    ):
        """Open a ledger.

        Args:
            account_number: Account identifier
            opening_balance: Starting balance (Decimal, int or amount string)
            policy: Balance policy for this account

        Raises:
            ValidationError: If the balance is not an exact amount, or is
                negative for an overdraft-checked account
        """
        balance = to_decimal(opening_balance)
        if policy is AccountPolicy.OVERDRAFT_CHECKED and balance < 0:
            raise ValidationError(
                f"Account {account_number} cannot open with a negative balance "
                f"under the {policy.value} policy"
            )
        self._account_number = account_number
        self._balance = balance
        self._policy = policy

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def policy(self) -> AccountPolicy:
        return self._policy

    def apply(self, transaction: Transaction) -> ApplyResult:
        """Deduct the transaction amount from the balance, subject to policy.

        Returns:
            AppliedTransaction with the new balance, or OverdraftRefusal with
            the unchanged balance
        """
        amount = transaction.amount
        if self._policy.refuses(self._balance, amount):
            logger.info(
                "Refused transaction %s on %s: amount %s exceeds balance %s",
                transaction.id,
                self._account_number,
                amount,
                self._balance,
            )
            return OverdraftRefusal(transaction_id=transaction.id, amount=amount, balance=self._balance)

        self._balance -= amount
        logger.debug(
            "Applied transaction %s on %s: new balance %s",
            transaction.id,
            self._account_number,
            self._balance,
        )
        return AppliedTransaction(transaction_id=transaction.id, amount=amount, balance=self._balance)

    def snapshot(self) -> AccountSnapshot:
        """Return an immutable view of the account."""
        return AccountSnapshot(
            account_number=self._account_number,
            balance=self._balance,
            policy=self._policy.value,
        )

    def __repr__(self) -> str:
        return (
            f"AccountLedger(account_number={self._account_number!r}, "
            f"balance={self._balance}, policy={self._policy.value})"
        )
