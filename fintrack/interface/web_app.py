"""Mini README: FastAPI-powered dashboard for the FinTrack ledger.

Structure:
    * build_session - wire the configured backend, adapter and store together.
    * create_application - application factory wiring routes and templates.

The dashboard lists transactions newest first, shows the running summary
and the last-saved stamp, and offers add/delete/clear/export actions. Every
mutation goes through ``LedgerSession`` so the ledger is flushed right away.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates

from ..configuration import FinTrackSettings, get_settings
from ..export import build_export_document, export_filename, render_export
from ..ledger.errors import ValidationError
from ..ledger.models import to_iso, utc_now
from ..ledger.session import LedgerSession, MutationOutcome
from ..logging_utils import get_logger
from ..storage import REGISTRY, PersistenceAdapter
from .formatting import format_currency, format_signed_amount, friendly_date

LOGGER = get_logger(__name__)


def build_session(settings: Optional[FinTrackSettings] = None) -> LedgerSession:
    """Create and hydrate a session backed by the configured storage backend."""

    settings = settings or get_settings()
    backend = REGISTRY.create(settings=settings)
    return LedgerSession(PersistenceAdapter(backend)).start()


def _state_payload(session: LedgerSession) -> Dict[str, object]:
    return {
        "transactions": [transaction.as_dict() for transaction in session.transactions()],
        "summary": session.summary().as_dict(),
        "last_saved": to_iso(session.last_saved) if session.last_saved else None,
    }


def _outcome_payload(session: LedgerSession, outcome: MutationOutcome) -> Dict[str, object]:
    payload = _state_payload(session)
    payload["warning"] = outcome.warning
    if outcome.transaction is not None:
        payload["transaction"] = outcome.transaction.as_dict()
    return payload


def create_application(session: Optional[LedgerSession] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="FinTrack", version="1.0.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["currency"] = format_currency
    templates.env.filters["signed_amount"] = format_signed_amount
    templates.env.filters["friendly_date"] = friendly_date

    ledger = session or build_session()
    app.state.session = ledger

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the ledger, summary and entry form."""

        read_error = ledger.read_error
        LOGGER.debug("Rendering dashboard with %s transactions", len(ledger.store))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "transactions": ledger.transactions(),
                "summary": ledger.summary(),
                "last_saved": ledger.last_saved,
                "read_error": None if read_error is None or read_error.missing else str(read_error),
            },
        )

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        """Return transactions newest first together with the summary."""

        return JSONResponse(_state_payload(ledger))

    @app.post("/transactions")
    def add_transaction(
        description: str = Form(""),
        amount: str = Form(""),
        type: str = Form(""),
    ) -> JSONResponse:
        """Record a transaction from the entry form."""

        try:
            outcome = ledger.add(description, amount, type)
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(_outcome_payload(ledger, outcome), status_code=201)

    @app.delete("/transactions/{transaction_id}")
    def delete_transaction(transaction_id: str) -> JSONResponse:
        """Delete one transaction by id."""

        outcome = ledger.remove(transaction_id)
        if not outcome.changed:
            raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
        return JSONResponse(_outcome_payload(ledger, outcome))

    @app.post("/clear")
    def clear_transactions() -> JSONResponse:
        """Delete every transaction; the page asks for confirmation first."""

        outcome = ledger.clear()
        return JSONResponse(_outcome_payload(ledger, outcome))

    @app.get("/summary")
    async def summary() -> JSONResponse:
        return JSONResponse(ledger.summary().as_dict())

    @app.get("/export")
    async def export() -> Response:
        """Offer the ledger as a downloadable JSON document."""

        moment = utc_now()
        document = build_export_document(ledger.store.list(), exported_at=moment)
        filename = export_filename(moment)
        LOGGER.info("Serving export %s", filename)
        return Response(
            render_export(document),
            media_type="application/json",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app
