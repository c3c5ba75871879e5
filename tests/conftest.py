"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Register pytest-asyncio plugin explicitly
pytest_plugins = ["pytest_asyncio"]

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.academics.service import AcademicsService  # noqa: E402
from src.academics.store import EntityStore, seed_store  # noqa: E402
from src.config import Settings  # noqa: E402
from src.index import create_app  # noqa: E402
from tests.constants import FIXED_DAY  # noqa: E402


@pytest.fixture
def store():
    """Store loaded with the standard seed records."""
    return seed_store(EntityStore())


@pytest.fixture
def empty_store():
    return EntityStore()


@pytest.fixture
def service():
    return AcademicsService(seed=True, clock=lambda: FIXED_DAY)


@pytest.fixture
def client(service):
    """Test client over a fresh, seeded application."""
    app = create_app(Settings(seed_data=True), service=service)
    return TestClient(app)
