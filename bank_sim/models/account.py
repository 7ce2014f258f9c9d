"""Account model with its transaction ledger."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

from bank_sim.exceptions import (
    InsufficientFundsError,
    InvalidAccountOperationError,
    ValidationError,
)
from bank_sim.models.enums import AccountKind, TransactionKind
from bank_sim.models.money import quantize, to_amount
from bank_sim.models.policy import plan_withdrawal
from bank_sim.models.terms import AccountTerms, CurrentTerms, SavingsTerms
from bank_sim.models.transaction import LedgerEntry, Transaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountSummary:
    """One-line view of an account."""

    account_number: str
    account_holder: str
    kind: AccountKind
    balance: Decimal


@dataclass(frozen=True)
class Statement:
    """Full ledger of an account together with its current balance."""

    account_number: str
    account_holder: str
    kind: AccountKind
    balance: Decimal
    transactions: tuple[Transaction, ...]


class Account:
    """Bank account owning a balance and an append-only transaction ledger.

    Every successful mutation appends to the ledger before returning, and
    every validation happens before the balance is touched, so a failed
    operation leaves both the balance and the ledger unchanged.

    Parameters
    ----------
    account_number : str
        Unique, non-empty identifier.
    account_holder : str
        Non-empty holder name.
    initial_balance : Any
        Opening balance, must not be negative.
    terms : AccountTerms
        ``SavingsTerms`` or ``CurrentTerms``.
    clock : Callable[[], datetime] | None
        Timestamp source for ledger entries (default ``datetime.now``).
    """

    def __init__(
        self,
        account_number: str,
        account_holder: str,
        initial_balance: Any,
        terms: AccountTerms,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not account_number or not account_number.strip():
            raise ValidationError("Account number required")
        if not account_holder or not account_holder.strip():
            raise ValidationError("Account holder name required")
        opening = to_amount(initial_balance, "initial_balance")
        if opening < 0:
            raise ValidationError("Initial balance cannot be negative")
        if not isinstance(terms, (SavingsTerms, CurrentTerms)):
            raise ValidationError(f"Unsupported account terms: {type(terms).__name__}")

        self._account_number = account_number
        self._account_holder = account_holder
        self._terms = terms
        self._clock = clock or datetime.now
        self._balance = opening
        self._transactions: list[Transaction] = []
        self._record(TransactionKind.OPEN, opening, "Account opened")

    @classmethod
    def savings(
        cls,
        account_number: str,
        account_holder: str,
        initial_balance: Any,
        annual_interest_rate: Any = 0,
        clock: Callable[[], datetime] | None = None,
    ) -> Account:
        """Open a savings account."""
        terms = SavingsTerms(annual_interest_rate=annual_interest_rate)
        return cls(account_number, account_holder, initial_balance, terms, clock=clock)

    @classmethod
    def current(
        cls,
        account_number: str,
        account_holder: str,
        initial_balance: Any,
        overdraft_limit: Any = 0,
        overdraft_fee: Any = 0,
        clock: Callable[[], datetime] | None = None,
    ) -> Account:
        """Open a current account."""
        terms = CurrentTerms(overdraft_limit=overdraft_limit, overdraft_fee=overdraft_fee)
        return cls(account_number, account_holder, initial_balance, terms, clock=clock)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def account_holder(self) -> str:
        return self._account_holder

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def terms(self) -> AccountTerms:
        return self._terms

    @property
    def kind(self) -> AccountKind:
        return self._terms.kind

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def deposit(self, amount: Any) -> Transaction:
        """Credit the account.

        Raises
        ------
        ValidationError
            If the amount is not greater than zero.
        """
        value = self._positive_amount(amount, "Deposit")
        return self._apply(LedgerEntry(TransactionKind.DEPOSIT, value, "Deposit"))

    def withdraw(self, amount: Any) -> list[Transaction]:
        """Debit the account according to its withdrawal policy.

        Returns the recorded transactions: the withdrawal, followed by an
        overdraft fee when a current account ends up below zero.

        Raises
        ------
        ValidationError
            If the amount is not greater than zero.
        InsufficientFundsError
            If the policy rejects the withdrawal. Nothing is recorded.
        """
        value = self._positive_amount(amount, "Withdrawal")
        try:
            entries = plan_withdrawal(self._terms, self._balance, value)
        except InsufficientFundsError:
            logger.info(
                "Withdrawal of %s rejected for account %s (balance %s)",
                value,
                self._account_number,
                self._balance,
            )
            raise
        return [self._apply(entry) for entry in entries]

    def apply_monthly_interest(self) -> Transaction | None:
        """Post one month of simple interest on a savings account.

        Interest is ``balance * rate / 100 / 12`` rounded to cents. Nothing
        is recorded when it is not positive.

        Raises
        ------
        InvalidAccountOperationError
            If the account is not a savings account.
        ValidationError
            If the interest is too large to be represented in cents.
        """
        if not isinstance(self._terms, SavingsTerms):
            raise InvalidAccountOperationError(
                f"Account {self._account_number} is not a savings account"
            )
        monthly_rate = self._terms.annual_interest_rate / Decimal(100) / Decimal(12)
        interest = quantize(self._balance * monthly_rate, "interest")
        if interest <= 0:
            return None
        return self._apply(
            LedgerEntry(TransactionKind.INTEREST, interest, "Monthly interest applied")
        )

    def statement(self) -> Statement:
        """Return every recorded transaction and the current balance."""
        return Statement(
            account_number=self._account_number,
            account_holder=self._account_holder,
            kind=self.kind,
            balance=self._balance,
            transactions=tuple(self._transactions),
        )

    def summary(self) -> AccountSummary:
        """Return account number, holder and current balance."""
        return AccountSummary(
            account_number=self._account_number,
            account_holder=self._account_holder,
            kind=self.kind,
            balance=self._balance,
        )

    def _positive_amount(self, amount: Any, label: str) -> Decimal:
        value = to_amount(amount)
        if value <= 0:
            raise ValidationError(f"{label} amount must be greater than zero.")
        return value

    def _apply(self, entry: LedgerEntry) -> Transaction:
        self._balance += entry.delta
        return self._record(entry.kind, abs(entry.delta), entry.description)

    def _record(self, kind: TransactionKind, amount: Decimal, description: str) -> Transaction:
        transaction = Transaction(
            timestamp=self._clock(),
            kind=kind,
            amount=amount,
            balance_after=self._balance,
            description=description,
        )
        self._transactions.append(transaction)
        logger.debug(
            "%s %s on %s, balance %s",
            kind.value,
            amount,
            self._account_number,
            self._balance,
        )
        return transaction

    def __repr__(self) -> str:
        return (
            f"Account(account_number={self._account_number!r}, "
            f"kind={self.kind.value}, balance={self._balance})"
        )
