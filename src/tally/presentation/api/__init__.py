"""REST API presentation layer for Tally.

This package provides a FastAPI-based REST API serving report chart data.

Structure:
    api/
    ├── app.py              # FastAPI application factory
    ├── chart_generator.py  # Report results -> chart payloads
    ├── config.py           # API configuration
    ├── dependencies.py     # Dependency injection
    ├── routers/            # API route handlers
    └── schemas/            # Pydantic response schemas
"""

from tally.presentation.api.app import create_app

__all__ = ["create_app"]
