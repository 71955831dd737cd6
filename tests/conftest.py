"""
Shared fixtures for the Folio test suite.

Run with: pytest -v
Install with: pip install -e ".[dev]"
"""

import os
import shutil
import tempfile

import pytest
from flask import Flask

from folio import Folio

ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for the test database, cleaned up after."""
    d = tempfile.mkdtemp(prefix="folio-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def app(tmp_db_dir):
    """Fully initialised Flask app with every Folio module registered."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["DB_DIR"] = tmp_db_dir
    app.config["PORTFOLIO_DB"] = os.path.join(tmp_db_dir, "portfolio.db")
    app.config["ADMIN_PASSWORD"] = ADMIN_PASSWORD
    app.config["SESSION_SECRET"] = "test-session-secret"
    app.config["ENVIRONMENT"] = "development"
    Folio(app)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield app.extensions["folio"].store


@pytest.fixture
def admin_client(client):
    """Test client holding a valid admin session cookie."""
    response = client.post("/admin/login", data={"password": ADMIN_PASSWORD})
    assert response.status_code == 302
    return client


def make_project(store, **overrides):
    values = {
        "title": "Portfolio",
        "description": "Personal site",
        "tech_stack": '["Flask", "SQLite"]',
        "category": "personal",
        "status": "completed",
        "featured": False,
    }
    values.update(overrides)
    return store.insert("projects", values)
