import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.operations`) works during pytest collection
# regardless of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
import structlog  # noqa: E402

from infrastructure.services import providers  # noqa: E402


@pytest.fixture(autouse=True)
def clear_cached_providers():
    """Drop cached settings and clients so env changes apply per test."""
    providers.get_settings.cache_clear()
    providers.get_directory_client.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_directory_client.cache_clear()


@pytest.fixture(autouse=True)
def clean_log_context():
    """Keep structlog context variables from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
