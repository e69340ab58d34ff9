"""
Server-rendered calculator page.

The page posts back to itself; results, the chart image, share links and
export links are rendered in one pass with render_template_string.
"""

from __future__ import annotations

import io
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from flask import Blueprint, abort, jsonify, render_template_string, request, send_file

from apycalc.app.api.routes import app_settings
from apycalc.core.export import export_result, render_chart_png
from apycalc.core.interest import calculate_from_raw
from apycalc.core.presentation import format_result, round_result, share_url, summary_line
from apycalc.core.release import current_version
from apycalc.core.validation import InputValidationError, ValidationLimits
from apycalc.schemas.calculation import (
    CalculationResult,
    ChartKind,
    ExportFormat,
    ShareTarget,
)

pages_bp = Blueprint("pages", __name__)

PAGE_TEMPLATE = r"""
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<meta name="app-version" content="{{ version }}">
<title>APY Calculator</title>
<style>
  body{font-family:Inter,system-ui,sans-serif;background:#0a101f;color:#f1f5f9;max-width:40rem;margin:2rem auto;padding:0 1rem}
  label{display:block;margin-top:1rem}
  input{width:100%;padding:.5rem;font-size:1rem}
  .error{color:#f87171}
  .result{margin-top:1.5rem;padding:1rem;background:#131b2e;border-radius:8px}
  img{max-width:100%}
  a{color:#818cf8}
</style>
</head>
<body>
<h1>APY Calculator</h1>
<form method="post" action="{{ url_for('pages.index') }}">
  <label for="apy">APY (%)</label>
  <input id="apy" name="apy" inputmode="decimal" value="{{ apy }}">
  <label for="amount">Amount ($)</label>
  <input id="amount" name="amount" inputmode="decimal" value="{{ amount }}">
  <label for="kind">Chart</label>
  <select id="kind" name="kind">
    {% for option in chart_kinds %}
    <option value="{{ option.value }}" {% if option == kind %}selected{% endif %}>{{ option.value|title }}</option>
    {% endfor %}
  </select>
  <p><button type="submit">Calculate</button></p>
</form>

{% for message in errors %}
<p class="error" role="alert">{{ message }}</p>
{% endfor %}

{% if result %}
<div class="result">
  <p>{{ summary }}</p>
  <div>Daily: <b>${{ formatted.dayEarn }}</b></div>
  <div>Monthly: <b>${{ formatted.monthEarn }}</b></div>
  <div>Yearly: <b>${{ formatted.yearEarn }}</b></div>
  <p>Total after 1 year: <b>${{ formatted.total }}</b></p>
  <img alt="Projected earnings chart" src="data:image/png;base64,{{ chart }}">
  <p>
    Share:
    {% for target, link in share_links %}
    <a href="{{ link }}" target="_blank" rel="noopener">{{ target.value|title }}</a>
    {% endfor %}
  </p>
  <p>
    Export:
    {% for fmt in export_formats %}
    <a href="{{ url_for('pages.download', fmt=fmt.value, apy=apy, amount=amount) }}">{{ fmt.value|upper }}</a>
    {% endfor %}
  </p>
</div>
{% endif %}
</body>
</html>
"""


def _calculate(apy: Optional[str], amount: Optional[str]) -> CalculationResult:
    settings = app_settings()
    return calculate_from_raw(
        apy,
        amount,
        limits=ValidationLimits.from_settings(settings),
        method=settings.compounding_method,
    )


@pages_bp.route("/", methods=["GET", "POST"])
def index() -> Any:
    form = request.form if request.method == "POST" else request.args
    apy = form.get("apy", "")
    amount = form.get("amount", "")
    try:
        kind = ChartKind(form.get("kind", ChartKind.BAR.value))
    except ValueError:
        kind = ChartKind.BAR

    context: Dict[str, Any] = {
        "apy": apy,
        "amount": amount,
        "kind": kind,
        "chart_kinds": list(ChartKind),
        "export_formats": list(ExportFormat),
        "version": app_settings().app_version,
        "errors": [],
        "result": None,
    }
    status = HTTPStatus.OK

    if request.method == "POST":
        try:
            result = _calculate(apy, amount)
        except InputValidationError as exc:
            context["errors"] = [error.message for error in exc.errors]
            status = HTTPStatus.BAD_REQUEST
        else:
            page_url = request.url_root
            share_links: List[tuple] = [
                (target, share_url(result, target, page_url))
                for target in ShareTarget
                if target != ShareTarget.COPY
            ]
            context.update(
                result=result,
                summary=summary_line(result.principal, result.apy),
                formatted=format_result(result),
                chart=render_chart_png(round_result(result), kind),
                share_links=share_links,
            )

    return render_template_string(PAGE_TEMPLATE, **context), status


@pages_bp.get("/download/<fmt>")
def download(fmt: str) -> Any:
    try:
        export_format = ExportFormat(fmt)
    except ValueError:
        abort(HTTPStatus.NOT_FOUND)

    try:
        result = _calculate(request.args.get("apy"), request.args.get("amount"))
    except InputValidationError as exc:
        return jsonify({"error": [error.message for error in exc.errors]}), HTTPStatus.BAD_REQUEST

    exported = export_result(result, export_format)
    return send_file(
        io.BytesIO(exported.content),
        mimetype=exported.mimetype,
        as_attachment=True,
        download_name=exported.filename,
    )


@pages_bp.get("/version.json")
def version_document() -> Any:
    response = jsonify(current_version(app_settings().app_version).model_dump())
    response.headers["Cache-Control"] = "no-store"
    return response
