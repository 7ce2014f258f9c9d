"""Account variant terms.

The account kinds form a closed set: every account carries exactly one of
the terms dataclasses below, and behaviour that differs per kind is
dispatched on the terms type rather than on an account subclass.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from bank_sim.exceptions import ValidationError
from bank_sim.models.enums import AccountKind
from bank_sim.models.money import ZERO, to_amount, to_decimal

MIN_BALANCE = Decimal("1000.00")


@dataclass(frozen=True)
class SavingsTerms:
    """Savings account terms.

    - annual_interest_rate: yearly rate in percent (2.5 means 2.5%)

    Withdrawals may never take the balance below ``MIN_BALANCE``.
    """

    annual_interest_rate: Decimal = ZERO

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "annual_interest_rate",
            to_decimal(self.annual_interest_rate, "annual_interest_rate"),
        )

    @property
    def kind(self) -> AccountKind:
        return AccountKind.SAVINGS


@dataclass(frozen=True)
class CurrentTerms:
    """Current account terms.

    - overdraft_limit: how far below zero a withdrawal may take the balance
    - overdraft_fee: charged whenever a withdrawal leaves the balance negative
    """

    overdraft_limit: Decimal = ZERO
    overdraft_fee: Decimal = ZERO

    def __post_init__(self) -> None:
        limit = to_amount(self.overdraft_limit, "overdraft_limit")
        fee = to_amount(self.overdraft_fee, "overdraft_fee")
        if limit < 0:
            raise ValidationError("Overdraft limit cannot be negative.")
        if fee < 0:
            raise ValidationError("Overdraft fee cannot be negative.")
        object.__setattr__(self, "overdraft_limit", limit)
        object.__setattr__(self, "overdraft_fee", fee)

    @property
    def kind(self) -> AccountKind:
        return AccountKind.CURRENT


AccountTerms = Union[SavingsTerms, CurrentTerms]

_TERMS_BY_KIND: dict[AccountKind, type] = {
    AccountKind.SAVINGS: SavingsTerms,
    AccountKind.CURRENT: CurrentTerms,
}


def build_terms(kind: AccountKind | str, **params: Any) -> AccountTerms:
    """Build the terms for an account kind from keyword parameters.

    Parameters
    ----------
    kind : AccountKind | str
        Account kind, as enum or its string value.
    **params : Any
        Variant fields (``annual_interest_rate`` for savings,
        ``overdraft_limit``/``overdraft_fee`` for current).

    Returns
    -------
    AccountTerms
        Validated terms instance.

    Raises
    ------
    ValidationError
        If the kind is unknown, a parameter is not accepted by the kind,
        or a value is invalid.
    """
    try:
        account_kind = AccountKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown account kind: {kind!r}") from None

    terms_cls = _TERMS_BY_KIND[account_kind]
    allowed = set(terms_cls.__dataclass_fields__)
    unknown = sorted(set(params) - allowed)
    if unknown:
        raise ValidationError(
            f"Unexpected parameters for {account_kind.value} account: {', '.join(unknown)}"
        )
    return terms_cls(**params)
