"""
Terminal interface for the APY calculator.

Usage:
    python -m apycalc --apy 5 --amount 1,000
    python -m apycalc --apy 5 --amount 1000 --export pdf --output results.pdf
    python -m apycalc --serve --port 5000
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from apycalc.config import settings
from apycalc.core.export import export_result
from apycalc.core.interest import calculate_from_raw
from apycalc.core.presentation import result_lines, summary_line
from apycalc.core.validation import InputValidationError, ValidationLimits
from apycalc.observability import setup_logging
from apycalc.schemas.calculation import CompoundingMethod, ExportFormat

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apycalc",
        description="Project daily, monthly and yearly earnings for a principal at a given APY.",
    )
    parser.add_argument("--apy", help="Annual percentage yield, e.g. 5 for 5%%")
    parser.add_argument("--amount", help="Principal amount; thousands separators are allowed")
    parser.add_argument(
        "--method",
        choices=[method.value for method in CompoundingMethod],
        default=settings.compounding_method.value,
        help="Compounding method (default: %(default)s)",
    )
    parser.add_argument(
        "--export",
        choices=[fmt.value for fmt in ExportFormat],
        help="Also write the result as CSV or PDF",
    )
    parser.add_argument("--output", type=Path, help="Export path (defaults to the standard file name)")
    parser.add_argument("--serve", action="store_true", help="Launch the web app instead")
    parser.add_argument("--port", type=int, default=5000)
    return parser


def run_web(port: int = 5000, debug: bool = False) -> None:
    from apycalc.app import create_app

    create_app().run(port=port, debug=debug)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.serve:
        run_web(port=args.port)
        return 0

    setup_logging(
        settings.log_level,
        json=settings.log_json,
        service_name=settings.service_name,
        stream=sys.stderr,
    )

    try:
        result = calculate_from_raw(
            args.apy,
            args.amount,
            limits=ValidationLimits.from_settings(settings),
            method=CompoundingMethod(args.method),
        )
    except InputValidationError as exc:
        for error in exc.errors:
            print(f"error: {error.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(summary_line(result.principal, result.apy))
    for line in result_lines(result):
        print(f"  {line}")

    if args.export:
        exported = export_result(result, ExportFormat(args.export))
        path = args.output or Path(exported.filename)
        path.write_bytes(exported.content)
        print(f"Saved {path}")

    return 0
