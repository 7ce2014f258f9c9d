"""Console sink rendering statements and account listings."""

import json
import sys
from typing import Iterable, TextIO

from bank_sim.models import AccountSummary, Statement, Transaction
from bank_sim.sinks.serialization import to_dict_fast

STATEMENT_HEADER = (
    f"{'Date & Time':<22} | {'Type':<8} | {'Amount':<10} | {'BalanceAfter':<12} | Description"
)
STATEMENT_RULE = "-----------------------+----------+------------+--------------+----------------"
STATEMENT_END = "-" * 40 + " End of statement " + "-" * 40

OUTPUT_FORMATS = ("table", "json")


def format_transaction(transaction: Transaction) -> str:
    """Format a transaction as one fixed-width statement line."""
    timestamp = transaction.timestamp.isoformat(timespec="seconds")
    return (
        f"{timestamp:<22} | {transaction.kind.value:<8} | "
        f"{transaction.amount:>10.2f} | {transaction.balance_after:>12.2f} | "
        f"{transaction.description}"
    )


def format_summary(summary: AccountSummary) -> str:
    """Format an account summary line."""
    return f"{summary.account_number} | {summary.account_holder} | Balance: {summary.balance:.2f}"


class ConsoleSink:
    """Write statements and account summaries to a text stream."""

    def __init__(self, stream: TextIO | None = None, output_format: str = "table") -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Destination stream (default: ``sys.stdout`` at write time).
        output_format : str
            ``"table"`` for fixed-width text or ``"json"``.
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format!r}")
        self._stream = stream
        self.output_format = output_format

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, message: str = "") -> None:
        """Write a plain message line."""
        print(message, file=self.stream)

    def write_statement(self, statement: Statement) -> None:
        """Write the full statement of an account."""
        if self.output_format == "json":
            data = {
                "account_number": statement.account_number,
                "account_holder": statement.account_holder,
                "kind": statement.kind.value,
                "balance": str(statement.balance),
                "transactions": [to_dict_fast(t) for t in statement.transactions],
            }
            self._write_json(data)
            return

        self.write(
            f"\n--- Statement for {statement.account_number} ({statement.account_holder}) ---"
        )
        self.write(f"Current balance: {statement.balance:.2f}")
        self.write(STATEMENT_HEADER)
        self.write(STATEMENT_RULE)
        for transaction in statement.transactions:
            self.write(format_transaction(transaction))
        self.write(STATEMENT_END)

    def write_summaries(self, summaries: Iterable[AccountSummary]) -> None:
        """Write one line per account."""
        summaries = list(summaries)
        if self.output_format == "json":
            self._write_json([to_dict_fast(s) for s in summaries])
            return

        if not summaries:
            self.write("No accounts available.")
            return
        self.write("\nAccounts:")
        for summary in summaries:
            self.write(format_summary(summary))

    def _write_json(self, data: object) -> None:
        self.write(json.dumps(data, indent=2, ensure_ascii=False))
