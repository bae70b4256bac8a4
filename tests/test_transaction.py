"""Tests for transaction creation and submission."""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

from recordkeep.domain.entities import Transaction
from recordkeep.domain.errors import DuplicateKeyError, NotFoundError, ValidationError
from recordkeep.domain.processing import MobileMoneyProcessor, get_processor
from recordkeep.domain.transaction import new_transaction


class RecordingProcessor:
    """Processor that remembers what it was given."""

    def __init__(self):
        self.seen = []

    def describe(self, transaction):
        return f"[Test] {transaction.amount}"

    def process(self, transaction):
        self.seen.append(transaction)


class TestNewTransaction:
    """Tests for new_transaction."""

    def test_fields(self):
        """Test that a transaction gets an id, timestamp and Decimal amount."""
        before = datetime.now()
        transaction = new_transaction("1,234.50", "Rent")

        assert isinstance(transaction.id, UUID)
        assert transaction.amount == Decimal("1234.50")
        assert transaction.category == "Rent"
        assert transaction.timestamp >= before

    def test_explicit_timestamp(self):
        """Test that a given timestamp is kept."""
        when = datetime(2024, 1, 15, 9, 30)
        assert new_transaction(5, "x", timestamp=when).timestamp == when

    def test_ids_are_unique(self):
        """Test that every transaction gets a new id."""
        assert new_transaction(1, "x").id != new_transaction(1, "x").id

    def test_float_amount_rejected(self):
        """Test that binary floats are refused."""
        with pytest.raises(ValidationError):
            new_transaction(0.1, "x")

    @pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")])
    def test_non_finite_amount_rejected(self, amount):
        """Test that NaN and infinite amounts never become transactions."""
        with pytest.raises(ValidationError):
            new_transaction(amount, "x")
        with pytest.raises(ValidationError):
            Transaction(id=uuid4(), timestamp=datetime.now(), amount=amount, category="x")

    def test_transaction_requires_decimal(self):
        """Test that the entity itself refuses non-Decimal amounts."""
        with pytest.raises(ValidationError):
            Transaction(id=uuid4(), timestamp=datetime.now(), amount=10, category="x")

    def test_transaction_immutable(self):
        """Test that transactions cannot be changed once created."""
        transaction = new_transaction(1, "x")
        with pytest.raises(Exception):
            transaction.amount = Decimal("2")


class TestTransactionService:
    """Tests for TransactionService."""

    def test_submit_processes_applies_and_records(self, transaction_service, overdraft_ledger):
        """Test the three effects of submit."""
        processor = RecordingProcessor()
        transaction = new_transaction("100", "Groceries")

        result = transaction_service.submit(transaction, processor, overdraft_ledger)

        assert processor.seen == [transaction]
        assert not result.refused
        assert overdraft_ledger.balance == Decimal("900")
        assert transaction_service.get_transaction(transaction.id) == transaction

    def test_refused_transaction_still_processed_and_recorded(self, transaction_service, overdraft_ledger):
        """Test that dispatch and recording do not depend on the ledger result."""
        processor = RecordingProcessor()
        transaction = new_transaction("5000", "Car")

        result = transaction_service.submit(transaction, processor, overdraft_ledger)

        assert result.refused
        assert processor.seen == [transaction]
        assert transaction_service.count() == 1

    def test_resubmission_rejected_without_side_effects(self, transaction_service, overdraft_ledger):
        """Test that the same transaction cannot be submitted twice."""
        processor = RecordingProcessor()
        transaction = new_transaction("100", "Groceries")
        transaction_service.submit(transaction, processor, overdraft_ledger)

        with pytest.raises(DuplicateKeyError):
            transaction_service.submit(transaction, processor, overdraft_ledger)

        assert len(processor.seen) == 1
        assert overdraft_ledger.balance == Decimal("900")
        assert transaction_service.count() == 1

    def test_get_unknown_transaction(self, transaction_service):
        """Test that lookup asserts existence."""
        with pytest.raises(NotFoundError):
            transaction_service.get_transaction(uuid4())

    def test_list_transactions_ordered_by_timestamp(self, transaction_service, standard_ledger):
        """Test that history is returned oldest first."""
        start = datetime(2024, 1, 1)
        late = new_transaction(1, "late", timestamp=start + timedelta(days=2))
        early = new_transaction(1, "early", timestamp=start)
        processor = MobileMoneyProcessor()

        transaction_service.submit(late, processor, standard_ledger)
        transaction_service.submit(early, processor, standard_ledger)

        assert [t.category for t in transaction_service.list_transactions()] == ["early", "late"]

    def test_finance_scenario(self, transaction_service, overdraft_ledger):
        """Test three transactions across three channels."""
        plan = [
            ("momo", "100", "Groceries"),
            ("bank", "250", "Utilities"),
            ("crypto", "900", "Entertainment"),
        ]
        results = [
            transaction_service.submit(new_transaction(amount, category), get_processor(kind), overdraft_ledger)
            for kind, amount, category in plan
        ]

        assert [r.refused for r in results] == [False, False, True]
        assert overdraft_ledger.balance == Decimal("650")
        assert transaction_service.count() == 3
