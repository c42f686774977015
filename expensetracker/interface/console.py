"""Mini README: Terminal rendering of the ledger for the Typer CLI.

``ConsoleDisplay`` keeps the last rows and summary the controller rendered
and prints them on request, so a command prints the final state once rather
than after every intermediate render. Validation messages go to stderr
immediately.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import typer

from ..ledger import FormattedSummary, FormInputs, LedgerDisplay, TransactionRow


class ConsoleDisplay(LedgerDisplay):
    def __init__(self, inputs: Optional[FormInputs] = None) -> None:
        self.inputs = inputs or FormInputs()
        self.rows: List[TransactionRow] = []
        self.summary: Optional[FormattedSummary] = None
        self.messages: List[str] = []

    def read_inputs(self) -> FormInputs:
        return self.inputs

    def clear_inputs(self) -> None:
        self.inputs = FormInputs(kind=self.inputs.kind)

    def show_transactions(self, rows: Sequence[TransactionRow]) -> None:
        self.rows = list(rows)

    def show_summary(self, summary: FormattedSummary) -> None:
        self.summary = summary

    def show_message(self, message: str) -> None:
        self.messages.append(message)
        typer.secho(message, fg=typer.colors.RED, err=True)

    def echo_transactions(self) -> None:
        if not self.rows:
            typer.echo("No transactions recorded.")
            return
        for row in self.rows:
            typer.echo(f"[{row.transaction_id}] {row.text}")

    def echo_summary(self) -> None:
        if self.summary is None:
            return
        typer.echo(f"Total income:   {self.summary.total_income}")
        typer.echo(f"Total expenses: {self.summary.total_expenses}")
        typer.echo(f"Balance:        {self.summary.balance}")
