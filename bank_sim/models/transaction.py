"""Transaction model for the account ledger."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_sim.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger entry for one balance-affecting event."""

    timestamp: datetime
    kind: TransactionKind
    amount: Decimal  # Always a positive magnitude
    balance_after: Decimal
    description: str


@dataclass(frozen=True)
class LedgerEntry:
    """A planned balance change that has not been recorded yet.

    ``delta`` is signed (negative for withdrawals and fees) while the
    resulting Transaction carries only the magnitude.
    """

    kind: TransactionKind
    delta: Decimal
    description: str
