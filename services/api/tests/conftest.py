import os
import pytest
from fastapi.testclient import TestClient

# Settings are read at import time; keep the per-IP limiter out of the test run
os.environ["RATE_LIMIT_ENABLED"] = "false"

from mealcycle.main import app


@pytest.fixture
def client():
    """Test client for the measurement API."""
    with TestClient(app) as c:
        yield c
