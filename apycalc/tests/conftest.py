from __future__ import annotations

import logging

import pytest
from flask import Flask
from flask.testing import FlaskClient

from apycalc.app import create_app
from apycalc.config import Settings


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put the previous ones back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def app_settings() -> Settings:
    return Settings(_env_file=None, log_json=False, app_version="1.4.0")


@pytest.fixture()
def app(app_settings: Settings) -> Flask:
    return create_app(app_settings)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
