import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from showcase.app.config import TestingConfig
from showcase.app.factory import create_app


@pytest.fixture()
def app():
    app = create_app(TestingConfig)
    yield app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client

