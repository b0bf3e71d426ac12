"""Shared fixtures."""

import pytest
import structlog

from centum import resolve_settings


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test installs."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def euro_settings():
    return resolve_settings({
        "symbol": "€",
        "separator": ".",
        "decimal": ",",
        "pattern": "# !",
        "negativePattern": "-# !",
    })
