"""Mini README: Core package initialiser for FinTrack.

FinTrack is a personal income/expense ledger with durable local storage
and a running summary. The package is split into ``ledger`` (data model,
store, aggregation, session), ``storage`` (codec, key-value backends and
the persistence adapter), ``export`` (downloadable snapshots) and
``interface`` (the web dashboard). Only the logger factory is re-exported
here so importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
