"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (ports mocked, SQLite in memory)
    │   ├── domain/
    │   ├── application/
    │   ├── infrastructure/
    │   └── presentation/
    └── integration/       # API tests through the FastAPI test client
"""

import pytest

from tally_config import clear_settings_cache


@pytest.fixture(autouse=True)
def configure_app_settings(monkeypatch):
    """Give every test fresh settings that never touch a real database."""
    monkeypatch.setenv("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    clear_settings_cache()
    yield
    clear_settings_cache()
