"""Mini README: Tests for the ledger value types and input gates.

Structure:
    * summary - totals per kind, balance and two-decimal formatting.
    * parsing - description trimming and finite amount parsing.
    * formatting - how amounts appear in list rows.
    * kinds - case-insensitive coercion of transaction kinds.
"""

from __future__ import annotations

import pytest

from expensetracker.ledger import (
    LedgerSummary,
    Transaction,
    TransactionKind,
    TransactionValidationError,
    compute_summary,
)
from expensetracker.ledger.models import format_amount, parse_amount, parse_description


def _transaction(identifier: int, amount: float, kind: TransactionKind) -> Transaction:
    return Transaction(
        id=identifier,
        description=f"entry {identifier}",
        amount=amount,
        kind=kind,
        display_color="#FF6384",
    )


def test_summary_sums_amounts_by_kind() -> None:
    """Income and expenses are summed separately and balance is their difference."""

    ledger = [
        _transaction(1, 0.1, TransactionKind.INCOME),
        _transaction(2, 0.2, TransactionKind.INCOME),
        _transaction(3, 10.005, TransactionKind.EXPENSE),
        _transaction(4, 2.5, TransactionKind.EXPENSE),
    ]

    summary = compute_summary(ledger)

    assert summary.total_income == pytest.approx(0.3)
    assert summary.total_expenses == pytest.approx(12.505)
    assert summary.balance == pytest.approx(summary.total_income - summary.total_expenses)
    assert summary.formatted().total_income == "0.30"


def test_empty_ledger_summary_is_zero() -> None:
    assert compute_summary([]).formatted().as_dict() == {
        "total_income": "0.00",
        "total_expenses": "0.00",
        "balance": "0.00",
    }


def test_negative_balance_formats_with_sign() -> None:
    assert LedgerSummary(total_income=5.0, total_expenses=7.25).formatted().balance == "-2.25"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("3.5", 3.5), (" 42 ", 42.0), ("-7", -7.0), ("1e3", 1000.0), (".25", 0.25)],
)
def test_parse_amount_accepts_finite_numbers(raw: str, expected: float) -> None:
    assert parse_amount(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", "abc", "nan", "-inf", "12abc", None])
def test_parse_amount_rejects_non_numeric(raw) -> None:
    with pytest.raises(TransactionValidationError):
        parse_amount(raw)


def test_parse_description_trims_and_rejects_blank() -> None:
    assert parse_description("  Rent  ") == "Rent"
    with pytest.raises(TransactionValidationError):
        parse_description(" \t ")


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(1000.0, "1000"), (3.5, "3.5"), (0.1, "0.1"), (-2.0, "-2"), (12.345, "12.345")],
)
def test_format_amount(amount: float, expected: str) -> None:
    assert format_amount(amount) == expected


def test_kind_from_str_normalises_case() -> None:
    assert TransactionKind.from_str(" Expense ") is TransactionKind.EXPENSE
    with pytest.raises(ValueError):
        TransactionKind.from_str("refund")


def test_transaction_from_dict_rejects_boolean_amount() -> None:
    with pytest.raises(TypeError):
        Transaction.from_dict(
            {"id": 1, "description": "a", "amount": True, "type": "income", "color": "red"}
        )


@pytest.mark.parametrize("raw", ["1_000", "١٢", "1e999", "0x10", "1,5"])
def test_parse_amount_accepts_only_ascii_decimals(raw: str) -> None:
    """Underscored, non-ASCII, overflowing and hex numerals are rejected."""

    with pytest.raises(TransactionValidationError):
        parse_amount(raw)
