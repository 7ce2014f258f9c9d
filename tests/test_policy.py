"""Tests for the withdrawal policy."""

from decimal import Decimal

import pytest

from bank_sim.exceptions import InsufficientFundsError
from bank_sim.models import (
    CurrentTerms,
    LedgerEntry,
    SavingsTerms,
    TransactionKind,
    plan_withdrawal,
)


class TestSavingsPolicy:
    """Savings withdrawals keep the minimum balance."""

    def test_withdrawal_to_exact_minimum(self) -> None:
        entries = plan_withdrawal(SavingsTerms(), Decimal("5000.00"), Decimal("4000.00"))

        assert entries == [
            LedgerEntry(TransactionKind.WITHDRAW, Decimal("-4000.00"), "Savings withdrawal")
        ]

    def test_withdrawal_below_minimum_rejected(self) -> None:
        with pytest.raises(InsufficientFundsError, match="minimum balance of 1000.00"):
            plan_withdrawal(SavingsTerms(), Decimal("5000.00"), Decimal("4000.01"))


class TestCurrentPolicy:
    """Current withdrawals respect the overdraft limit and charge a fee."""

    def test_positive_result_has_no_fee(self) -> None:
        terms = CurrentTerms(overdraft_limit="500", overdraft_fee="50")
        entries = plan_withdrawal(terms, Decimal("2000.00"), Decimal("2000.00"))

        assert [e.kind for e in entries] == [TransactionKind.WITHDRAW]
        assert entries[0].description == "Current withdrawal"

    def test_negative_result_adds_fee(self) -> None:
        terms = CurrentTerms(overdraft_limit="500", overdraft_fee="50")
        entries = plan_withdrawal(terms, Decimal("2000.00"), Decimal("2200.00"))

        assert entries == [
            LedgerEntry(TransactionKind.WITHDRAW, Decimal("-2200.00"), "Current withdrawal"),
            LedgerEntry(TransactionKind.FEE, Decimal("-50.00"), "Overdraft fee applied"),
        ]

    def test_exactly_at_limit_allowed(self) -> None:
        terms = CurrentTerms(overdraft_limit="500", overdraft_fee="50")
        entries = plan_withdrawal(terms, Decimal("0.00"), Decimal("500.00"))
        assert len(entries) == 2

    def test_beyond_limit_rejected(self) -> None:
        terms = CurrentTerms(overdraft_limit="500", overdraft_fee="50")
        with pytest.raises(InsufficientFundsError, match="overdraft limit of 500.00"):
            plan_withdrawal(terms, Decimal("0.00"), Decimal("500.01"))

    def test_zero_limit(self) -> None:
        terms = CurrentTerms(overdraft_limit="0", overdraft_fee="50")
        with pytest.raises(InsufficientFundsError):
            plan_withdrawal(terms, Decimal("100.00"), Decimal("150.00"))


class TestUnknownTerms:
    """Dispatch on an unregistered type."""

    def test_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="No withdrawal policy"):
            plan_withdrawal(object(), Decimal("1"), Decimal("1"))
