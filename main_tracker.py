"""Mini README: Entry point CLI for the expense tracker.

This script exposes a Typer CLI that starts the FastAPI dashboard and also
manages the ledger straight from the terminal (add, delete, list, summary,
chart export). Every command reads the same JSON store the dashboard uses,
located through environment-aware settings or ``--data-directory``.
"""

from __future__ import annotations

import os
from pathlib import Path

import typer
import uvicorn

from expensetracker.configuration import ExpenseTrackerSettings, get_settings
from expensetracker.interface import ConsoleDisplay, build_controller
from expensetracker.ledger import FormInputs, TransactionKind
from expensetracker.logging_utils import configure_root_logger, level_for_environment

cli = typer.Typer(help="Track income and expenses from the browser or the terminal.")


@cli.callback()
def main(
    ctx: typer.Context,
    data_directory: Path = typer.Option(
        None, help="Directory holding the JSON store (overrides settings)."
    ),
) -> None:
    """Load settings and configure logging for every command."""

    settings = get_settings()
    if data_directory is not None:
        settings = settings.model_copy(update={"data_directory": data_directory.expanduser()})
    configure_root_logger(level_for_environment(settings.environment))
    ctx.obj = settings


@cli.command()
def run(
    ctx: typer.Context,
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI dashboard using uvicorn."""

    settings: ExpenseTrackerSettings = ctx.obj
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    # The app factory reads settings itself, in this process or a reload worker.
    os.environ["EXPENSE_TRACKER_DATA_DIRECTORY"] = str(settings.data_directory)
    get_settings.cache_clear()

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Expense Tracker on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "expensetracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def add(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="What the money was for."),
    amount: str = typer.Argument(..., help="Amount, e.g. 12.50."),
    kind: TransactionKind = typer.Option(TransactionKind.INCOME, help="Income or expense."),
) -> None:
    """Add a transaction and print the updated ledger."""

    display = ConsoleDisplay(FormInputs(description=description, amount=amount, kind=kind.value))
    controller, _ = build_controller(display, settings=ctx.obj)
    transaction = controller.submit()
    if transaction is None:
        raise typer.Exit(code=1)
    typer.echo(f"Added transaction {transaction.id}.")
    display.echo_transactions()
    display.echo_summary()


@cli.command()
def delete(
    ctx: typer.Context,
    transaction_id: int = typer.Argument(..., help="Id shown by the list command."),
) -> None:
    """Delete a transaction by id."""

    display = ConsoleDisplay()
    controller, _ = build_controller(display, settings=ctx.obj)
    if controller.delete_transaction(transaction_id):
        typer.echo(f"Deleted transaction {transaction_id}.")
    else:
        typer.echo(f"No transaction with id {transaction_id}; nothing deleted.")
    display.echo_transactions()
    display.echo_summary()


@cli.command(name="list")
def list_transactions(ctx: typer.Context) -> None:
    """Print every transaction in insertion order."""

    display = ConsoleDisplay()
    build_controller(display, settings=ctx.obj)
    display.echo_transactions()


@cli.command()
def summary(ctx: typer.Context) -> None:
    """Print total income, total expenses and balance."""

    display = ConsoleDisplay()
    build_controller(display, settings=ctx.obj)
    display.echo_summary()


@cli.command()
def chart(
    ctx: typer.Context,
    output: Path = typer.Argument(..., help="Where to write the SVG pie chart."),
) -> None:
    """Export the pie chart of all transactions as SVG."""

    _, canvas = build_controller(ConsoleDisplay(), settings=ctx.obj)
    output.write_text(canvas.markup, encoding="utf-8")
    typer.echo(f"Chart written to {output}")


if __name__ == "__main__":
    cli()
