"""Mini README: Interactive interfaces (web/CLI) for the expense tracker.

Exports the FastAPI application factory behind the browser dashboard, the
console display used by the Typer CLI and the shared controller wiring.
"""

from .bootstrap import build_controller
from .console import ConsoleDisplay
from .web_app import WebDisplay, create_application

__all__ = ["ConsoleDisplay", "WebDisplay", "build_controller", "create_application"]
