"""Enumeration types for the account domain."""

from enum import Enum


class AccountKind(str, Enum):
    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"


class TransactionKind(str, Enum):
    OPEN = "OPEN"
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    INTEREST = "INTEREST"
    FEE = "FEE"
