"""Mini README: FastAPI-powered dashboard for the expense tracker.

Structure:
    * WebDisplay - page state the ledger controller renders into.
    * create_application - application factory wiring routes and templates.

The dashboard shows the entry form, the transaction list with delete
buttons, the income/expense/balance summary and the pie chart. Handlers are
plain ``async def`` functions that never await, so each request's ledger
operation finishes before the next request is looked at.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import ExpenseTrackerSettings, get_settings
from ..ledger import FormattedSummary, FormInputs, LedgerDisplay, TransactionKind, TransactionRow
from ..logging_utils import get_logger
from ..storage import KeyValueStore
from .bootstrap import build_controller

LOGGER = get_logger(__name__)


class WebDisplay(LedgerDisplay):
    """Hold what the next dashboard render should show."""

    def __init__(self) -> None:
        self.inputs = FormInputs()
        self.rows: List[TransactionRow] = []
        self.summary = FormattedSummary("0.00", "0.00", "0.00")
        self.message: Optional[str] = None

    def load_form(self, description: str, amount: str, kind: str) -> None:
        """Copy a submitted form into the inputs and drop any old message."""

        self.inputs = FormInputs(description=description, amount=amount, kind=kind)
        self.message = None

    def take_message(self) -> Optional[str]:
        message, self.message = self.message, None
        return message

    def read_inputs(self) -> FormInputs:
        return self.inputs

    def clear_inputs(self) -> None:
        self.inputs = FormInputs(kind=self.inputs.kind)

    def show_transactions(self, rows: Sequence[TransactionRow]) -> None:
        self.rows = list(rows)

    def show_summary(self, summary: FormattedSummary) -> None:
        self.summary = summary

    def show_message(self, message: str) -> None:
        self.message = message


def create_application(
    settings: Optional[ExpenseTrackerSettings] = None,
    store: Optional[KeyValueStore] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and its ledger controller."""

    settings = settings or get_settings()
    app = FastAPI(title="Expense Tracker", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    display = WebDisplay()
    controller, canvas = build_controller(display, settings=settings, store=store)
    app.state.controller = controller

    def render_dashboard(request: Request, status_code: int = 200) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "inputs": display.inputs,
                "rows": display.rows,
                "summary": display.summary,
                "message": display.take_message(),
                "kinds": list(TransactionKind),
            },
            status_code=status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the form, list, summary and chart."""

        LOGGER.debug("Rendering dashboard with %s rows", len(display.rows))
        return render_dashboard(request)

    @app.post("/transactions", response_model=None)
    async def add_transaction(
        request: Request,
        description: str = Form(""),
        amount: str = Form(""),
        kind: TransactionKind = Form(TransactionKind.INCOME),
    ) -> HTMLResponse | RedirectResponse:
        """Add a transaction from the submitted form."""

        display.load_form(description, amount, kind.value)
        if controller.submit() is None:
            return render_dashboard(request, status_code=400)
        return RedirectResponse("/", status_code=303)

    @app.post("/transactions/{transaction_id}/delete")
    async def delete_transaction(transaction_id: int) -> RedirectResponse:
        """Delete a transaction; unknown ids just redirect back."""

        controller.delete_transaction(transaction_id)
        return RedirectResponse("/", status_code=303)

    @app.get("/api/transactions")
    async def transactions() -> JSONResponse:
        """Return the ledger and formatted summary."""

        return JSONResponse(controller.snapshot())

    @app.get("/chart.svg")
    async def chart() -> Response:
        """Return the current pie chart."""

        return Response(
            canvas.markup,
            media_type="image/svg+xml",
            headers={"Cache-Control": "no-store"},
        )

    return app
