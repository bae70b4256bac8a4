"""Shared pytest fixtures for recordkeep tests."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from recordkeep.domain.account import AccountLedger, AccountPolicy
from recordkeep.domain.entities import ElectronicItem, GroceryItem, Patient, Prescription
from recordkeep.domain.inventory import create_electronics_store, create_grocery_store
from recordkeep.domain.prescriptions import PrescriptionService
from recordkeep.domain.transaction import TransactionService


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler, level and propagation changes made by configure_logging."""
    package_logger = logging.getLogger("recordkeep")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate

    yield

    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def electronics_store():
    """Create an electronics store with two items."""
    store = create_electronics_store()
    store.add(ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=24))
    store.add(ElectronicItem(id=2, name="Phone", quantity=25, brand="Samsung", warranty_months=12))
    return store


@pytest.fixture
def grocery_store():
    """Create a grocery store with two items."""
    store = create_grocery_store()
    store.add(GroceryItem(id=1, name="Milk", quantity=40, expires_on=date(2024, 3, 1)))
    store.add(GroceryItem(id=2, name="Bread", quantity=15, expires_on=date(2024, 2, 20)))
    return store


@pytest.fixture
def overdraft_ledger():
    """Create an overdraft-checked ledger holding 1000."""
    return AccountLedger("Cal121233", Decimal("1000"), AccountPolicy.OVERDRAFT_CHECKED)


@pytest.fixture
def standard_ledger():
    """Create a standard ledger holding 1000."""
    return AccountLedger("Chk-001", Decimal("1000"), AccountPolicy.STANDARD)


@pytest.fixture
def transaction_service():
    """Create a TransactionService with an empty history."""
    return TransactionService()


@pytest.fixture
def prescription_service():
    """Create a PrescriptionService with three patients and five prescriptions."""
    service = PrescriptionService()
    service.register_patient(Patient(id=1, name="Ama Mensah", age=34, gender="F"))
    service.register_patient(Patient(id=2, name="Kofi Boateng", age=52, gender="M"))
    service.register_patient(Patient(id=3, name="Esi Owusu", age=27, gender="F"))
    service.add_prescriptions(
        [
            Prescription(id=101, patient_id=1, medication="Amoxicillin", issued_on=date(2024, 1, 10)),
            Prescription(id=102, patient_id=2, medication="Metformin", issued_on=date(2024, 1, 11)),
            Prescription(id=103, patient_id=1, medication="Ibuprofen", issued_on=date(2024, 1, 12)),
            Prescription(id=104, patient_id=3, medication="Lisinopril", issued_on=date(2024, 1, 13)),
            Prescription(id=105, patient_id=2, medication="Atorvastatin", issued_on=date(2024, 1, 14)),
        ]
    )
    return service


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
