"""Transaction domain service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from recordkeep.domain.account import AccountLedger, ApplyResult
from recordkeep.domain.entities import Transaction
from recordkeep.domain.errors import DuplicateKeyError, duplicate_key
from recordkeep.domain.processing import TransactionProcessor
from recordkeep.store.keyed import KeyedStore
from recordkeep.utils.amount_parser import to_decimal

logger = logging.getLogger(__name__)


def new_transaction(
    amount: Decimal | int | str,
    category: str,
    timestamp: Optional[datetime] = None,
) -> Transaction:
    """Create a transaction with a fresh id.

    Args:
        amount: Transaction amount (Decimal, int or amount string)
        category: Free-text category label
        timestamp: Transaction time (defaults to now)

    Raises:
        ValidationError: If amount is a float or cannot be parsed
    """
    return Transaction(
        id=uuid4(),
        timestamp=timestamp if timestamp is not None else datetime.now(),
        amount=to_decimal(amount),
        category=category,
    )


class TransactionService:
    """Dispatches transactions and keeps a history of everything submitted."""

    def __init__(self, store: Optional[KeyedStore[UUID, Transaction]] = None):
        """Initialize transaction service.

        Args:
            store: Store for submitted transactions (a new one if omitted)
        """
        self.store = store if store is not None else KeyedStore(lambda t: t.id, name="transaction")

    def submit(
        self,
        transaction: Transaction,
        processor: TransactionProcessor,
        ledger: AccountLedger,
    ) -> ApplyResult:
        """Process a transaction, apply it to a ledger and record it.

        Processing and balance application are independent: the processor
        runs even when the ledger refuses the transaction, and the
        transaction is recorded either way.

        Returns:
            The ledger's result for the transaction

        Raises:
            DuplicateKeyError: If the transaction was already submitted
        """
        if transaction.id in self.store:
            raise DuplicateKeyError(
                duplicate_key(self.store.name, transaction.id),
                key=transaction.id,
                store=self.store.name,
            )

        processor.process(transaction)
        result = ledger.apply(transaction)
        self.store.add(transaction)
        logger.debug(
            "Recorded transaction %s (%s, refused=%s)",
            transaction.id,
            transaction.category,
            result.refused,
        )
        return result

    def get_transaction(self, transaction_id: UUID) -> Transaction:
        """Get a submitted transaction.

        Raises:
            NotFoundError: If no such transaction was submitted
        """
        return self.store.get(transaction_id)

    def list_transactions(self) -> list[Transaction]:
        """List submitted transactions ordered by timestamp."""
        return sorted(self.store.get_all(), key=lambda t: t.timestamp)

    def count(self) -> int:
        """Return the number of submitted transactions."""
        return len(self.store)
