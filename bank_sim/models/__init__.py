"""Account domain models."""

from bank_sim.models.account import Account, AccountSummary, Statement
from bank_sim.models.enums import AccountKind, TransactionKind
from bank_sim.models.money import quantize, to_amount, to_decimal
from bank_sim.models.policy import plan_withdrawal
from bank_sim.models.terms import (
    MIN_BALANCE,
    AccountTerms,
    CurrentTerms,
    SavingsTerms,
    build_terms,
)
from bank_sim.models.transaction import LedgerEntry, Transaction

__all__ = [
    "MIN_BALANCE",
    "Account",
    "AccountKind",
    "AccountSummary",
    "AccountTerms",
    "CurrentTerms",
    "LedgerEntry",
    "SavingsTerms",
    "Statement",
    "Transaction",
    "TransactionKind",
    "build_terms",
    "plan_withdrawal",
    "quantize",
    "to_amount",
    "to_decimal",
]
