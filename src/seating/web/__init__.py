"""FastAPI REST API for sofa configuration normalization and pricing.

This module exposes the normalization pipeline, the event reducer, price
breakdowns and configuration validation over HTTP.

Usage:
    uvicorn seating.web:app --reload
"""

from seating.web.app import app, create_app

__all__ = ["app", "create_app"]
