from __future__ import annotations

from flask.testing import FlaskClient


def test_index_renders_empty_form(client: FlaskClient):
    resp = client.get("/")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert '<form method="post"' in html
    assert 'content="1.4.0"' in html
    assert "Total after 1 year" not in html


def test_index_renders_result(client: FlaskClient):
    resp = client.post("/", data={"apy": "5", "amount": "1,000", "kind": "doughnut"})

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "With $1,000.00 at 5.00% APY, you&#39;ll earn:" in html
    assert "Total after 1 year: <b>$1,051.27</b>" in html
    assert "data:image/png;base64," in html
    assert "https://wa.me/?text=" in html
    assert "/download/csv?" in html


def test_index_shows_validation_errors(client: FlaskClient):
    resp = client.post("/", data={"apy": "abc", "amount": "0"})

    assert resp.status_code == 400
    html = resp.get_data(as_text=True)
    assert "APY must be a valid number." in html
    assert "Amount must be greater than $0." in html
    assert "Total after 1 year" not in html


def test_download_csv(client: FlaskClient):
    resp = client.get("/download/csv", query_string={"apy": "5", "amount": "1000"})

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"


def test_download_unknown_format(client: FlaskClient):
    resp = client.get("/download/xlsx", query_string={"apy": "5", "amount": "1000"})
    assert resp.status_code == 404


def test_download_rejects_invalid_input(client: FlaskClient):
    resp = client.get("/download/pdf", query_string={"apy": "5"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == ["Amount is required."]
