"""Account registry keyed by account number."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterator

from bank_sim.exceptions import AccountNotFoundError, DuplicateAccountError
from bank_sim.models import (
    Account,
    AccountKind,
    AccountSummary,
    SavingsTerms,
    Transaction,
    build_terms,
)

logger = logging.getLogger(__name__)


class AccountRegistry:
    """In-memory store owning every account of a session.

    Accounts are only ever added; there is no removal. Iteration and
    ``list_accounts`` follow insertion order.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._accounts: dict[str, Account] = {}
        self._clock = clock

    @classmethod
    def with_demo_accounts(cls, clock: Callable[[], datetime] | None = None) -> AccountRegistry:
        """Create a registry seeded with one savings and one current account."""
        registry = cls(clock=clock)
        registry.create(
            AccountKind.SAVINGS, "SA1001", "Alice", "5000.00", annual_interest_rate="2.5"
        )
        registry.create(
            AccountKind.CURRENT,
            "CA2001",
            "Bob",
            "2000.00",
            overdraft_limit="500.00",
            overdraft_fee="50.00",
        )
        return registry

    def create(
        self,
        kind: AccountKind | str,
        account_number: str,
        account_holder: str,
        initial_balance: Any,
        **params: Any,
    ) -> Account:
        """Open a new account of the given kind and register it.

        Parameters
        ----------
        kind : AccountKind | str
            ``SAVINGS`` or ``CURRENT``.
        account_number : str
            Unique account number.
        account_holder : str
            Holder name.
        initial_balance : Any
            Opening balance.
        **params : Any
            Variant terms (``annual_interest_rate`` or
            ``overdraft_limit``/``overdraft_fee``).

        Returns
        -------
        Account
            The registered account.

        Raises
        ------
        DuplicateAccountError
            If the account number is taken.
        ValidationError
            If any value is invalid.
        """
        self._ensure_available(account_number)
        terms = build_terms(kind, **params)
        account = Account(
            account_number, account_holder, initial_balance, terms, clock=self._clock
        )
        self._accounts[account_number] = account
        logger.info(
            "Opened %s account %s for %s with balance %s",
            account.kind.value,
            account_number,
            account_holder,
            account.balance,
        )
        return account

    def add(self, account: Account) -> None:
        """Register an already constructed account."""
        self._ensure_available(account.account_number)
        self._accounts[account.account_number] = account
        logger.info("Registered %s account %s", account.kind.value, account.account_number)

    def lookup(self, account_number: str) -> Account:
        """Get an account by number."""
        try:
            return self._accounts[account_number]
        except KeyError:
            raise AccountNotFoundError(f"Account {account_number} not found") from None

    def list_accounts(self) -> list[AccountSummary]:
        """Return summaries of all accounts."""
        return [account.summary() for account in self._accounts.values()]

    def apply_monthly_interest(self) -> list[Transaction]:
        """Post monthly interest on every savings account.

        Returns the INTEREST transactions that were recorded.
        """
        posted = []
        for account in self._accounts.values():
            if not isinstance(account.terms, SavingsTerms):
                continue
            transaction = account.apply_monthly_interest()
            if transaction is not None:
                posted.append(transaction)
        logger.info("Posted monthly interest on %d account(s)", len(posted))
        return posted

    def _ensure_available(self, account_number: str) -> None:
        if account_number in self._accounts:
            raise DuplicateAccountError(f"Account number {account_number} already exists")

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts.values())
