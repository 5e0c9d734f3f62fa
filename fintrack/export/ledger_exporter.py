"""Mini README: Export ledger snapshots as downloadable JSON documents.

Structure:
    * build_export_document - ``{exportedAt, transactions}`` payload.
    * export_filename - ``fintrack-export-YYYY-MM-DD-HH-MM-SS.json`` names.
    * LedgerExporter - writes an export document to a directory.

Exports are read-only snapshots for the user to keep; they are never read
back as a persistence path.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from ..ledger.models import Transaction, to_iso, utc_now
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def build_export_document(
    transactions: Iterable[Transaction], exported_at: Optional[datetime] = None
) -> Dict[str, object]:
    """Return the export payload for ``transactions`` in ledger order."""

    return {
        "exportedAt": to_iso(exported_at or utc_now()),
        "transactions": [transaction.as_dict() for transaction in transactions],
    }


def export_filename(moment: Optional[datetime] = None) -> str:
    """Name an export after its UTC timestamp down to the second."""

    stamp = to_iso(moment or utc_now())[:19].replace(":", "-").replace("T", "-")
    return f"fintrack-export-{stamp}.json"


def render_export(document: Dict[str, object]) -> str:
    """Pretty-print an export document."""

    return json.dumps(document, indent=2)


@dataclass(slots=True)
class LedgerExporter:
    """Persist export documents to disk."""

    clock: Callable[[], datetime] = field(default=utc_now)

    def export(self, transactions: Iterable[Transaction], output_directory: Path) -> Path:
        """Write the export next to previous ones and return its path."""

        moment = self.clock()
        document = build_export_document(transactions, exported_at=moment)
        output_directory = Path(output_directory)
        output_directory.mkdir(parents=True, exist_ok=True)
        destination = output_directory / export_filename(moment)
        destination.write_text(render_export(document), encoding="utf-8")
        LOGGER.info(
            "Exported %s transactions to %s", len(document["transactions"]), destination
        )
        return destination
