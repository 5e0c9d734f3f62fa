"""Mini README: Interactive interfaces for FinTrack.

Exports the FastAPI application factory powering the browser dashboard
and the session builder used by the launcher.
"""

from .web_app import build_session, create_application

__all__ = ["build_session", "create_application"]
