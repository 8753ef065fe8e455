# tests/conftest.py
import os

import pytest
from starlette.testclient import TestClient

os.environ.setdefault("ATM_LOG_TO_FILE", "0")   # <-- keep test runs out of logs/

from note_dispenser.app import create_app


@pytest.fixture(scope="session")
def app():
    return create_app()

@pytest.fixture()
def client(app):
    return TestClient(app)

@pytest.fixture()
def lenient_client(app):
    # 500s come back as responses instead of being re-raised into the test
    return TestClient(app, raise_server_exceptions=False)
