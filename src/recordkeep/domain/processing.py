"""Transaction processors selected by payment channel."""

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from recordkeep.domain.entities import Transaction

logger = logging.getLogger(__name__)


@runtime_checkable
class TransactionProcessor(Protocol):
    """Capability shared by all processors: handle one transaction."""

    def describe(self, transaction: Transaction) -> str:
        ...

    def process(self, transaction: Transaction) -> None:
        ...


class BankTransferProcessor:
    """Processes transactions sent by bank transfer."""

    label = "BankTransfer"

    def describe(self, transaction: Transaction) -> str:
        return f"[{self.label}] Amount: {transaction.amount}, Category: {transaction.category}"

    def process(self, transaction: Transaction) -> None:
        logger.info("%s", self.describe(transaction))


class MobileMoneyProcessor:
    """Processes mobile money transactions."""

    label = "MoMo"

    def describe(self, transaction: Transaction) -> str:
        return f"[{self.label}] Amount: {transaction.amount}, Category: {transaction.category}"

    def process(self, transaction: Transaction) -> None:
        logger.info("%s", self.describe(transaction))


class CryptoWalletProcessor:
    """Processes crypto wallet transactions."""

    label = "Crypto"

    def describe(self, transaction: Transaction) -> str:
        return f"[{self.label}] Amount: {transaction.amount}, Category: {transaction.category}"

    def process(self, transaction: Transaction) -> None:
        logger.info("%s", self.describe(transaction))


class ProcessorKind(Enum):
    """Known processor variants."""

    BANK_TRANSFER = "bank"
    MOBILE_MONEY = "momo"
    CRYPTO_WALLET = "crypto"


_PROCESSORS: dict[ProcessorKind, type] = {
    ProcessorKind.BANK_TRANSFER: BankTransferProcessor,
    ProcessorKind.MOBILE_MONEY: MobileMoneyProcessor,
    ProcessorKind.CRYPTO_WALLET: CryptoWalletProcessor,
}


def get_processor(kind: ProcessorKind | str) -> TransactionProcessor:
    """Return a processor for ``kind`` (an enum member or its value).

    Raises:
        ValueError: If kind is not a known processor
    """
    return _PROCESSORS[ProcessorKind(kind)]()
