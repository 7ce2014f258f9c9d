"""Demo account generator."""

from __future__ import annotations

import logging
import random
from decimal import Decimal

from bank_sim.exceptions import DuplicateAccountError
from bank_sim.generators.base import BaseGenerator
from bank_sim.models import Account, AccountKind, CurrentTerms, SavingsTerms
from bank_sim.store import AccountRegistry

logger = logging.getLogger(__name__)


class DemoAccountGenerator(BaseGenerator):
    """Generate synthetic savings and current accounts.

    Account mix:
    - SAVINGS: ~60%, numbered ``SA####``, opening balance 1000-20000
    - CURRENT: ~40%, numbered ``CA####``, opening balance 0-10000
    """

    ACCOUNT_KINDS = [AccountKind.SAVINGS, AccountKind.CURRENT]
    ACCOUNT_KIND_WEIGHTS = [0.60, 0.40]

    NUMBER_PREFIXES = {
        AccountKind.SAVINGS: "SA",
        AccountKind.CURRENT: "CA",
    }

    INTEREST_RATES = ["0.5", "1.0", "1.5", "2.0", "2.5", "3.0", "4.0"]
    OVERDRAFT_LIMITS = ["0", "250", "500", "1000", "2000"]
    OVERDRAFT_FEES = ["0", "15", "25", "35", "50"]

    NUMBER_RANGE = range(1000, 10000)

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        super().__init__(seed, locale=locale)
        self._issued: set[str] = set()

    def generate(
        self,
        kind: AccountKind | None = None,
        account_number: str | None = None,
    ) -> Account:
        """Generate a single account.

        Parameters
        ----------
        kind : AccountKind | None
            Account kind; picked by weight when omitted.
        account_number : str | None
            Account number; a fresh ``SA####``/``CA####`` number when omitted.

        Returns
        -------
        Account
            Generated account.
        """
        if kind is None:
            kind = self._pick_kind()
        if account_number is None:
            account_number = self._next_number(kind)
        self._issued.add(account_number)

        holder = self.fake.name()
        if kind == AccountKind.SAVINGS:
            balance = Decimal(random.randint(100_000, 2_000_000)) / 100
            terms = SavingsTerms(annual_interest_rate=random.choice(self.INTEREST_RATES))
        else:
            balance = Decimal(random.randint(0, 1_000_000)) / 100
            terms = CurrentTerms(
                overdraft_limit=random.choice(self.OVERDRAFT_LIMITS),
                overdraft_fee=random.choice(self.OVERDRAFT_FEES),
            )
        return Account(account_number, holder, balance, terms)

    def populate(self, registry: AccountRegistry, count: int) -> list[Account]:
        """Add ``count`` generated accounts to a registry.

        Numbers already present in the registry are never reused. Nothing is
        added when fewer than ``count`` numbers are left.

        Raises
        ------
        DuplicateAccountError
            If the free account numbers cannot cover ``count`` accounts.
        """
        self._issued.update(account.account_number for account in registry)
        capacity = self.capacity()
        if count > capacity:
            raise DuplicateAccountError(
                f"Cannot generate {count} account(s): only {capacity} number(s) left"
            )
        accounts = []
        for _ in range(count):
            account = self.generate()
            registry.add(account)
            accounts.append(account)
        logger.info("Generated %d demo account(s)", len(accounts))
        return accounts

    def capacity(self) -> int:
        """Number of account numbers still free across all kinds."""
        return sum(len(self._free_numbers(kind)) for kind in self.ACCOUNT_KINDS)

    def _pick_kind(self) -> AccountKind:
        kinds, weights = [], []
        for kind, weight in zip(self.ACCOUNT_KINDS, self.ACCOUNT_KIND_WEIGHTS):
            if self._has_free(kind):
                kinds.append(kind)
                weights.append(weight)
        if not kinds:
            raise DuplicateAccountError("No free account number left")
        return random.choices(kinds, weights=weights, k=1)[0]

    def _has_free(self, kind: AccountKind) -> bool:
        prefix = self.NUMBER_PREFIXES[kind]
        return any(f"{prefix}{n}" not in self._issued for n in self.NUMBER_RANGE)

    def _free_numbers(self, kind: AccountKind) -> list[str]:
        prefix = self.NUMBER_PREFIXES[kind]
        candidates = (f"{prefix}{n}" for n in self.NUMBER_RANGE)
        return [number for number in candidates if number not in self._issued]

    def _next_number(self, kind: AccountKind) -> str:
        free = self._free_numbers(kind)
        if not free:
            prefix = self.NUMBER_PREFIXES[kind]
            raise DuplicateAccountError(f"No free {prefix} account number left")
        return random.choice(free)
