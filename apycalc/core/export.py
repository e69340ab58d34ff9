"""
Chart data, chart images and downloadable exports for a calculation result.

Provides:
  - chart series for client-side charting (chart_payload)
  - base64-encoded PNG charts for web embedding (render_chart_png)
  - CSV and single-page PDF exports (export_result)
"""

from __future__ import annotations

import base64
import csv
import io
from dataclasses import dataclass
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.colors import to_rgba
from matplotlib.ticker import FuncFormatter

from apycalc.core.presentation import format_result, result_lines, summary_line
from apycalc.schemas.calculation import (
    CalculationResult,
    ChartKind,
    ChartPayload,
    ExportFormat,
)

CHART_LABELS = ["Daily", "Monthly", "Yearly"]

BLUE = "#347aff"
SERIES_ALPHAS = [0.8, 0.6, 0.4]
TEXT = "#222c37"

A4W, A4H = 8.27, 11.69
WEB_W, WEB_H = 8, 5

EXPORT_BASENAME = "apy-calculator-results"


@dataclass(frozen=True)
class ExportedFile:
    content: bytes
    mimetype: str
    filename: str


def chart_values(result: CalculationResult) -> List[float]:
    return [result.dayEarn, result.monthEarn, result.yearEarn]


def chart_payload(result: CalculationResult, kind: ChartKind = ChartKind.BAR) -> ChartPayload:
    return ChartPayload(kind=kind, labels=list(CHART_LABELS), values=chart_values(result))


def _usd_fmt(x, _):
    return f"${x:,.2f}"


USD_FMT = FuncFormatter(_usd_fmt)


def _draw_chart(ax, result: CalculationResult, kind: ChartKind) -> None:
    values = chart_values(result)
    colors = [to_rgba(BLUE, alpha) for alpha in SERIES_ALPHAS]

    if kind == ChartKind.BAR:
        ax.bar(CHART_LABELS, values, color=colors, edgecolor=BLUE, linewidth=2)
        ax.yaxis.set_major_formatter(USD_FMT)
        ax.set_ylim(bottom=0)
    elif kind == ChartKind.LINE:
        ax.plot(CHART_LABELS, values, color=BLUE, marker="o", linewidth=2)
        ax.yaxis.set_major_formatter(USD_FMT)
        ax.set_ylim(bottom=0)
    elif kind == ChartKind.PIE:
        ax.pie(values, labels=CHART_LABELS, colors=colors)
        ax.axis("equal")
    else:  # DOUGHNUT
        ax.pie(values, labels=CHART_LABELS, colors=colors, wedgeprops={"width": 0.4})
        ax.axis("equal")

    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)


def build_chart_figure(result: CalculationResult, kind: ChartKind = ChartKind.BAR, figsize=(WEB_W, WEB_H)) -> plt.Figure:
    fig, ax = plt.subplots(figsize=figsize)
    _draw_chart(ax, result, kind)
    ax.set_title("Projected earnings", color=TEXT)
    fig.tight_layout()
    return fig


def figure_to_base64(fig: plt.Figure) -> str:
    """Convert a matplotlib figure to a base64-encoded PNG string."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=120, bbox_inches="tight")
    buf.seek(0)
    b64 = base64.b64encode(buf.read()).decode()
    buf.close()
    return b64


def render_chart_png(result: CalculationResult, kind: ChartKind = ChartKind.BAR) -> str:
    fig = build_chart_figure(result, kind)
    try:
        return figure_to_base64(fig)
    finally:
        plt.close(fig)


def export_csv(result: CalculationResult) -> bytes:
    formatted = format_result(result)
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerows(
        [
            ["Category", "Value"],
            ["Principal", f"${formatted.principal}"],
            ["APY", f"{formatted.apy}%"],
            ["Daily Earnings", f"${formatted.dayEarn}"],
            ["Monthly Earnings", f"${formatted.monthEarn}"],
            ["Yearly Earnings", f"${formatted.yearEarn}"],
            ["Total After 1 Year", f"${formatted.total}"],
        ]
    )
    return buf.getvalue().encode("utf-8")


def export_pdf(result: CalculationResult, kind: ChartKind = ChartKind.BAR) -> bytes:
    """Single A4 page: title, summary, result lines and the chart."""
    fig = plt.figure(figsize=(A4W, A4H))
    fig.text(0.08, 0.94, "APY Calculator Results", fontsize=20, color=BLUE, weight="bold")
    fig.text(0.08, 0.90, summary_line(result.principal, result.apy), fontsize=12, color=TEXT)
    for index, line in enumerate(result_lines(result)):
        fig.text(0.08, 0.86 - index * 0.025, line, fontsize=12, color=TEXT)

    ax = fig.add_axes([0.12, 0.12, 0.78, 0.5])
    _draw_chart(ax, result, kind)

    buf = io.BytesIO()
    try:
        with PdfPages(buf) as pdf:
            pdf.savefig(fig)
    finally:
        plt.close(fig)
    return buf.getvalue()


def export_result(result: CalculationResult, fmt: ExportFormat) -> ExportedFile:
    if fmt == ExportFormat.PDF:
        return ExportedFile(
            content=export_pdf(result),
            mimetype="application/pdf",
            filename=f"{EXPORT_BASENAME}.pdf",
        )
    return ExportedFile(
        content=export_csv(result),
        mimetype="text/csv",
        filename=f"{EXPORT_BASENAME}.csv",
    )
