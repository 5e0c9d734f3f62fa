"""Mini README: Export utilities for FinTrack ledger snapshots.

Exposes helpers that turn the current ledger into the
``{exportedAt, transactions}`` JSON document offered as a download.
"""

from .ledger_exporter import LedgerExporter, build_export_document, export_filename, render_export

__all__ = ["LedgerExporter", "build_export_document", "export_filename", "render_export"]
