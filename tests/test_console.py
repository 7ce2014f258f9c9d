"""Tests for the interactive console."""

import io
from decimal import Decimal
from typing import Callable

import pytest

from bank_sim.console import BankConsole
from bank_sim.models import AccountKind, TransactionKind
from bank_sim.sinks import ConsoleSink
from bank_sim.store import AccountRegistry


def scripted(*lines: str) -> Callable[[str], str]:
    """Input function replaying ``lines`` and then signalling EOF."""
    remaining = iter(lines)

    def _input(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture
def demo_registry() -> AccountRegistry:
    return AccountRegistry.with_demo_accounts()


def run_session(registry: AccountRegistry, *lines: str) -> str:
    stream = io.StringIO()
    BankConsole(registry, ConsoleSink(stream=stream), input_func=scripted(*lines)).run()
    return stream.getvalue()


class TestBankConsoleSession:
    """End-to-end menu sessions."""

    def test_exit(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "7")

        assert "=== Welcome to the Bank Account Simulation ===" in output
        assert "1. Create account (Savings / Current)" in output
        assert output.rstrip().endswith("Thank you for using the simulation. Goodbye!")

    def test_end_of_input_ends_session(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry)
        assert "Goodbye!" in output

    def test_end_of_input_mid_command(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "2", "SA1001")

        assert "Goodbye!" in output
        assert demo_registry.lookup("SA1001").balance == Decimal("5000.00")

    def test_invalid_choice(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "9", "7")
        assert "Invalid choice. Please enter a number from the menu." in output

    def test_list_accounts(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "5", "7")

        assert "SA1001 | Alice | Balance: 5000.00" in output
        assert "CA2001 | Bob | Balance: 2000.00" in output

    def test_list_no_accounts(self) -> None:
        output = run_session(AccountRegistry(), "5", "7")
        assert "No accounts available." in output

    def test_deposit(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "2", "SA1001", "250.25", "7")

        assert "Deposit successful. New balance: 5250.25" in output
        assert demo_registry.lookup("SA1001").balance == Decimal("5250.25")

    def test_deposit_retries_invalid_number(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "2", "SA1001", "lots", "10", "7")

        assert "Please enter a valid number." in output
        assert demo_registry.lookup("SA1001").balance == Decimal("5010.00")

    def test_deposit_non_positive(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "2", "SA1001", "0", "7")

        assert "Deposit failed: Deposit amount must be greater than zero." in output
        assert len(demo_registry.lookup("SA1001").transactions) == 1

    def test_deposit_oversized_amount(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "2", "SA1001", "1e30", "7")

        assert "Deposit failed: amount must not exceed" in output
        assert "Goodbye!" in output
        assert demo_registry.lookup("SA1001").balance == Decimal("5000.00")

    def test_deposit_unknown_account(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "2", "XX0000", "7")
        assert "Deposit failed: Account XX0000 not found" in output

    def test_withdraw_overdraft(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "3", "CA2001", "2200", "7")

        assert "Withdrawal successful. New balance: -250.00" in output
        kinds = [t.kind for t in demo_registry.lookup("CA2001").transactions]
        assert kinds == [TransactionKind.OPEN, TransactionKind.WITHDRAW, TransactionKind.FEE]

    def test_withdraw_insufficient_funds(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "3", "SA1001", "4500", "5", "7")

        assert "Withdrawal failed: Cannot withdraw. Savings accounts must maintain" in output
        assert "SA1001 | Alice | Balance: 5000.00" in output

    def test_statement(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "2", "CA2001", "100", "4", "CA2001", "7")

        assert "--- Statement for CA2001 (Bob) ---" in output
        assert "Current balance: 2100.00" in output
        assert "| DEPOSIT  |     100.00 |      2100.00 | Deposit" in output

    def test_apply_interest(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "6", "7")

        assert "Monthly interest posted to 1 account(s)." in output
        assert demo_registry.lookup("SA1001").balance == Decimal("5010.42")


class TestBankConsoleCreate:
    """Account creation through the menu."""

    def test_create_savings(self) -> None:
        registry = AccountRegistry()
        output = run_session(registry, "1", "s", "SA1002", "Carol", "1500", "3", "7")

        account = registry.lookup("SA1002")
        assert account.kind == AccountKind.SAVINGS
        assert account.account_holder == "Carol"
        assert account.balance == Decimal("1500.00")
        assert account.terms.annual_interest_rate == Decimal("3")
        assert "Savings account created:" in output
        assert "SA1002 | Carol | Balance: 1500.00" in output

    def test_create_current(self) -> None:
        registry = AccountRegistry()
        output = run_session(registry, "1", "C", "CA3001", "Dave", "0", "300", "20", "7")

        account = registry.lookup("CA3001")
        assert account.kind == AccountKind.CURRENT
        assert account.terms.overdraft_limit == Decimal("300.00")
        assert account.terms.overdraft_fee == Decimal("20.00")
        assert "Current account created:" in output

    def test_create_unknown_type(self) -> None:
        registry = AccountRegistry()
        output = run_session(registry, "1", "X", "7")

        assert "Unknown account type. Use S or C." in output
        assert len(registry) == 0

    def test_create_duplicate(self, demo_registry: AccountRegistry) -> None:
        output = run_session(demo_registry, "1", "S", "SA1001", "7")

        assert "Account number already exists." in output
        assert demo_registry.lookup("SA1001").account_holder == "Alice"

    def test_create_invalid_values(self) -> None:
        registry = AccountRegistry()
        output = run_session(registry, "1", "C", "CA3001", "Dave", "100", "-5", "10", "7")

        assert "Error creating account: Overdraft limit cannot be negative." in output
        assert "CA3001" not in registry

    def test_create_empty_holder(self) -> None:
        registry = AccountRegistry()
        output = run_session(registry, "1", "S", "SA7", "", "1500", "1", "7")

        assert "Error creating account: Account holder name required" in output


class TestHandle:
    """Direct command dispatch."""

    def test_exit_returns_false(self, demo_registry: AccountRegistry) -> None:
        console = BankConsole(demo_registry, ConsoleSink(stream=io.StringIO()), scripted())
        assert console.handle("7") is False

    def test_command_returns_true(self, demo_registry: AccountRegistry) -> None:
        console = BankConsole(demo_registry, ConsoleSink(stream=io.StringIO()), scripted())
        assert console.handle("5") is True
