"""
Devlink API package.

Provides the FastAPI application for the Devlink social network service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
