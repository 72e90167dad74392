"""
Retail audit API package.

Provides the FastAPI application for the retail audit console.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
