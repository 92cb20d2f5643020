"""FastAPI REST API for door panel layouts.

Usage:
    uvicorn doorpanels.web:app --reload
"""

from doorpanels.web.app import app, create_app

__all__ = ["app", "create_app"]
