"""Interactive console menu driving an account registry."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from bank_sim.exceptions import BankSimError, ValidationError
from bank_sim.logging import get_logger
from bank_sim.models import AccountKind, to_decimal
from bank_sim.sinks import ConsoleSink
from bank_sim.store import AccountRegistry

logger = get_logger(__name__)

MENU = """
Menu:
1. Create account (Savings / Current)
2. Deposit
3. Withdraw
4. Print account statement
5. List accounts
6. Apply monthly interest (savings accounts)
7. Exit"""

KIND_CODES = {
    "S": AccountKind.SAVINGS,
    "C": AccountKind.CURRENT,
}


class SessionEnded(Exception):
    """Raised when the input stream is exhausted."""


class BankConsole:
    """Menu loop over an explicitly constructed registry.

    Every ``BankSimError`` raised by a command is reported and the session
    continues. The loop ends on the Exit choice or end of input.

    Parameters
    ----------
    registry : AccountRegistry
        Accounts the session operates on.
    sink : ConsoleSink | None
        Output sink (default: table output on stdout).
    input_func : Callable[[str], str] | None
        Prompt reader (default: the builtin ``input``).
    """

    def __init__(
        self,
        registry: AccountRegistry,
        sink: ConsoleSink | None = None,
        input_func: Callable[[str], str] | None = None,
    ) -> None:
        self.registry = registry
        self.sink = sink or ConsoleSink()
        self._input = input_func or input
        self._commands: dict[str, tuple[Callable[[], None], str]] = {
            "1": (self.create_account, "Error creating account"),
            "2": (self.deposit, "Deposit failed"),
            "3": (self.withdraw, "Withdrawal failed"),
            "4": (self.print_statement, "Statement failed"),
            "5": (self.list_accounts, "Listing failed"),
            "6": (self.apply_interest, "Interest posting failed"),
        }

    def run(self) -> None:
        """Run the menu until Exit or end of input."""
        self.sink.write("=== Welcome to the Bank Account Simulation ===")
        running = True
        while running:
            self.sink.write(MENU)
            try:
                choice = self._prompt("Choose an option: ")
                running = self.handle(choice)
            except SessionEnded:
                running = False
        self.sink.write("Thank you for using the simulation. Goodbye!")

    def handle(self, choice: str) -> bool:
        """Execute one menu choice. Returns ``False`` when the session should end."""
        if choice == "7":
            return False
        command = self._commands.get(choice)
        if command is None:
            self.sink.write("Invalid choice. Please enter a number from the menu.")
            return True

        action, failure_label = command
        try:
            action()
        except BankSimError as err:
            logger.info("%s: %s", failure_label, err)
            self.sink.write(f"{failure_label}: {err}")
        return True

    def create_account(self) -> None:
        code = self._prompt("Enter account type (S for Savings / C for Current): ").upper()
        kind = KIND_CODES.get(code)
        if kind is None:
            self.sink.write("Unknown account type. Use S or C.")
            return
        account_number = self._prompt("Enter account number (e.g. SA1002): ")
        if account_number in self.registry:
            self.sink.write("Account number already exists. Try again with a unique number.")
            return
        holder = self._prompt("Enter account holder name: ")
        initial = self._read_decimal("Enter initial deposit amount: ")

        if kind == AccountKind.SAVINGS:
            rate = self._read_decimal("Enter annual interest rate (percent, e.g. 2.5): ")
            account = self.registry.create(
                kind, account_number, holder, initial, annual_interest_rate=rate
            )
            label = "Savings"
        else:
            limit = self._read_decimal("Enter overdraft limit (e.g. 500): ")
            fee = self._read_decimal("Enter overdraft fee (e.g. 50): ")
            account = self.registry.create(
                kind,
                account_number,
                holder,
                initial,
                overdraft_limit=limit,
                overdraft_fee=fee,
            )
            label = "Current"
        self.sink.write(f"{label} account created:")
        self.sink.write_summaries([account.summary()])

    def deposit(self) -> None:
        account = self.registry.lookup(self._prompt("Enter account number: "))
        amount = self._read_decimal("Enter deposit amount: ")
        account.deposit(amount)
        self.sink.write(f"Deposit successful. New balance: {account.balance:.2f}")

    def withdraw(self) -> None:
        account = self.registry.lookup(self._prompt("Enter account number: "))
        amount = self._read_decimal("Enter withdrawal amount: ")
        account.withdraw(amount)
        self.sink.write(f"Withdrawal successful. New balance: {account.balance:.2f}")

    def print_statement(self) -> None:
        account = self.registry.lookup(self._prompt("Enter account number: "))
        self.sink.write_statement(account.statement())

    def list_accounts(self) -> None:
        self.sink.write_summaries(self.registry.list_accounts())

    def apply_interest(self) -> None:
        posted = self.registry.apply_monthly_interest()
        self.sink.write(f"Monthly interest posted to {len(posted)} account(s).")

    def _prompt(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except EOFError:
            raise SessionEnded from None

    def _read_decimal(self, prompt: str) -> Decimal:
        while True:
            line = self._prompt(prompt)
            try:
                return to_decimal(line)
            except ValidationError:
                self.sink.write("Please enter a valid number.")
