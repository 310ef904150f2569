import sys
from pathlib import Path

import pytest

# Flat layout: make the project root importable without an install
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from app import create_app  # noqa: E402
from config import TestingConfig  # noqa: E402


@pytest.fixture
def app():
    """Flask app with CSRF off and a small bulk import limit."""
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def dob():
    return "2018-05-15"


@pytest.fixture
def tested_on():
    """Test date used in the worked example: 6 years 11 months after `dob`."""
    return "2025-05-10"
