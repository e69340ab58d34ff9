"""HTTP routes for the Flask API."""

import io
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request, send_file
from pydantic import ValidationError

from apycalc.config import SETTINGS_KEY, Settings
from apycalc.core.export import chart_payload, export_result, render_chart_png
from apycalc.core.interest import calculate_from_raw
from apycalc.core.presentation import format_result, round_result, share_result, summary_line
from apycalc.core.release import current_version, get_ping_message
from apycalc.core.validation import InputValidationError, ValidationLimits
from apycalc.schemas.calculation import (
    CalculationRequest,
    CalculationResponse,
    CalculationResult,
    ChartRequest,
    ExportRequest,
    ShareRequest,
)
from apycalc.schemas.version import PingResponse

api_bp = Blueprint("api", __name__)


def app_settings() -> Settings:
    return current_app.config[SETTINGS_KEY]


def run_request(payload: CalculationRequest) -> CalculationResult:
    """Validate the raw values in ``payload`` and compute the result."""
    settings = app_settings()
    return calculate_from_raw(
        payload.apy,
        payload.amount,
        limits=ValidationLimits.from_settings(settings),
        method=payload.method or settings.compounding_method,
    )


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InputValidationError)
def _handle_input_error(exc: InputValidationError):
    """Rejected form values: one message per failing field."""
    return (
        jsonify(
            {
                "error": [error.message for error in exc.errors],
                "detail": [error.as_dict() for error in exc.errors],
            }
        ),
        HTTPStatus.BAD_REQUEST,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.get("/version")
def version() -> Any:
    """Version document polled by clients to detect new deployments."""
    return jsonify(current_version(app_settings().app_version).model_dump())


@api_bp.post("/calc/interest")
def interest() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationRequest.model_validate(raw_payload)
    result = run_request(payload)
    response = CalculationResponse(
        result=result,
        summary=summary_line(result.principal, result.apy),
        formatted=format_result(result),
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/chart")
def chart() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ChartRequest.model_validate(raw_payload)
    result = round_result(run_request(payload))
    response = chart_payload(result, payload.kind)
    if payload.render:
        response.image = render_chart_png(result, payload.kind)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/share")
def share() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ShareRequest.model_validate(raw_payload)
    result = run_request(payload)
    response = share_result(result, payload.target, payload.pageUrl)
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/export")
def export() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ExportRequest.model_validate(raw_payload)
    exported = export_result(run_request(payload), payload.format)
    return send_file(
        io.BytesIO(exported.content),
        mimetype=exported.mimetype,
        as_attachment=True,
        download_name=exported.filename,
    )
