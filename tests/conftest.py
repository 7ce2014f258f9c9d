"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Callable, Iterator

import pytest

from bank_sim.models import Account
from bank_sim.store import AccountRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock returning one-second steps from 2024-01-15 09:30:00."""
    start = datetime(2024, 1, 15, 9, 30, 0)
    ticks: Iterator[int] = iter(range(10_000))
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def savings_account(fixed_clock: Callable[[], datetime]) -> Account:
    """Savings account with balance 5000.00 and a 2.5% annual rate."""
    return Account.savings(
        "SA1001", "Alice", "5000.00", annual_interest_rate="2.5", clock=fixed_clock
    )


@pytest.fixture
def current_account(fixed_clock: Callable[[], datetime]) -> Account:
    """Current account with balance 2000.00, limit 500.00 and fee 50.00."""
    return Account.current(
        "CA2001",
        "Bob",
        "2000.00",
        overdraft_limit="500.00",
        overdraft_fee="50.00",
        clock=fixed_clock,
    )


@pytest.fixture
def registry(fixed_clock: Callable[[], datetime]) -> AccountRegistry:
    """Empty registry with a deterministic clock."""
    return AccountRegistry(clock=fixed_clock)
