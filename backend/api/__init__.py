"""
Monitoring API package.

Provides the FastAPI application for operator/supervisor shift monitoring.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
