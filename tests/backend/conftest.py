import os
import sys
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from backend.app.main import create_app  # noqa: E402
from core.db import DatabaseManager  # noqa: E402


@pytest.fixture
def test_app_client(test_db) -> Iterator[tuple[TestClient, DatabaseManager]]:
    app = create_app(database=test_db)

    with TestClient(app) as client:
        yield client, test_db


@pytest.fixture
def client(test_app_client) -> TestClient:
    client, _ = test_app_client
    return client
