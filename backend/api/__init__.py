"""
CampusBuzz admin API package.

Provides the FastAPI application for student verification and post
moderation.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
