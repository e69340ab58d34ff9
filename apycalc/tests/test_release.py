from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from apycalc.core.release import current_version, is_update_available, parse_version


def test_parse_version():
    assert parse_version("1.10.2") == (1, 10, 2)
    assert parse_version("v2.0") == (2, 0)
    assert parse_version("1.x") is None
    assert parse_version("") is None


@pytest.mark.parametrize(
    "current,latest,expected",
    [
        ("1.0.0", "1.0.1", True),
        ("1.9.0", "1.10.0", True),
        ("1.2", "1.2.0", False),
        ("1.2.0", "1.2", False),
        ("2.0.0", "1.9.9", False),
        ("1.0.0", "1.0.0", False),
        ("1.0.0", "beta", False),
        ("garbage", "9.9.9", False),
    ],
)
def test_is_update_available(current, latest, expected):
    assert is_update_available(current, latest) is expected


def test_current_version_document():
    assert current_version("3.1.4").model_dump() == {"version": "3.1.4"}


def test_version_json_is_not_cached(client: FlaskClient):
    resp = client.get("/version.json")

    assert resp.status_code == 200
    assert resp.get_json() == {"version": "1.4.0"}
    assert resp.headers["Cache-Control"] == "no-store"
