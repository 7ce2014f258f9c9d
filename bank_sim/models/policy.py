"""Withdrawal policy, dispatched on the account terms."""

from decimal import Decimal
from functools import singledispatch

from bank_sim.exceptions import InsufficientFundsError
from bank_sim.models.enums import TransactionKind
from bank_sim.models.terms import MIN_BALANCE, CurrentTerms, SavingsTerms
from bank_sim.models.transaction import LedgerEntry


@singledispatch
def plan_withdrawal(terms: object, balance: Decimal, amount: Decimal) -> list[LedgerEntry]:
    """Plan the ledger entries of a withdrawal.

    The function never mutates anything: it either returns the entries to
    record, in order, or raises ``InsufficientFundsError``.

    Parameters
    ----------
    terms : AccountTerms
        Terms of the account being debited.
    balance : Decimal
        Current balance.
    amount : Decimal
        Positive, cent-rounded withdrawal amount.

    Returns
    -------
    list[LedgerEntry]
        Entries to apply.
    """
    raise TypeError(f"No withdrawal policy for {type(terms).__name__}")


@plan_withdrawal.register
def _(terms: SavingsTerms, balance: Decimal, amount: Decimal) -> list[LedgerEntry]:
    if balance - amount < MIN_BALANCE:
        raise InsufficientFundsError(
            "Cannot withdraw. Savings accounts must maintain a minimum balance of "
            f"{MIN_BALANCE}"
        )
    return [LedgerEntry(TransactionKind.WITHDRAW, -amount, "Savings withdrawal")]


@plan_withdrawal.register
def _(terms: CurrentTerms, balance: Decimal, amount: Decimal) -> list[LedgerEntry]:
    projected = balance - amount
    if projected < -terms.overdraft_limit:
        raise InsufficientFundsError(
            f"Cannot withdraw: would exceed overdraft limit of {terms.overdraft_limit}"
        )
    entries = [LedgerEntry(TransactionKind.WITHDRAW, -amount, "Current withdrawal")]
    # Fee is not re-checked against the overdraft limit
    if projected < 0:
        entries.append(
            LedgerEntry(TransactionKind.FEE, -terms.overdraft_fee, "Overdraft fee applied")
        )
    return entries
