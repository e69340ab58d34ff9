"""Rounding, display formatting and share messages for calculation results."""

from __future__ import annotations

import math
from typing import List, Optional
from urllib.parse import quote

from apycalc.schemas.calculation import (
    CalculationResult,
    FormattedResult,
    ShareResponse,
    ShareTarget,
)

MONEY_DECIMALS = 2
# enough precision that small daily earnings don't display as $0.00
DAY_DECIMALS = 4


def format_number(value: Optional[float], decimals: int = MONEY_DECIMALS) -> str:
    """Format with a thousands separator and fixed decimals; '' for NaN."""
    if value is None or math.isnan(value):
        return ""
    return f"{value:,.{decimals}f}"


def format_money(value: float, decimals: int = MONEY_DECIMALS) -> str:
    return f"${format_number(value, decimals)}"


def round_result(result: CalculationResult) -> CalculationResult:
    """Round for display: daily figure to 4 places, everything else to 2."""
    return result.model_copy(
        update={
            "dayEarn": round(result.dayEarn, DAY_DECIMALS),
            "monthEarn": round(result.monthEarn, MONEY_DECIMALS),
            "yearEarn": round(result.yearEarn, MONEY_DECIMALS),
            "total": round(result.total, MONEY_DECIMALS),
        }
    )


def format_result(result: CalculationResult) -> FormattedResult:
    return FormattedResult(
        principal=format_number(result.principal),
        apy=format_number(result.apy),
        dayEarn=format_number(result.dayEarn, DAY_DECIMALS),
        monthEarn=format_number(result.monthEarn),
        yearEarn=format_number(result.yearEarn),
        total=format_number(result.total),
    )


def summary_line(principal: float, apy: float) -> str:
    return f"With {format_money(principal)} at {format_number(apy)}% APY, you'll earn:"


def result_lines(result: CalculationResult) -> List[str]:
    """Human-readable breakdown shared by the page, the CLI and exports."""
    formatted = format_result(result)
    return [
        f"Principal: ${formatted.principal}",
        f"APY: {formatted.apy}%",
        f"Daily: ${formatted.dayEarn}",
        f"Monthly: ${formatted.monthEarn}",
        f"Yearly: ${formatted.yearEarn}",
        f"Total after 1 year: ${formatted.total}",
    ]


def share_text(result: CalculationResult, target: ShareTarget) -> str:
    if target == ShareTarget.COPY:
        header = "APY Calculator Results:"
    else:
        header = "Check out my APY calculation:"
    return "\n".join([header, *result_lines(result)])


def share_url(
    result: CalculationResult,
    target: ShareTarget,
    page_url: Optional[str] = None,
) -> Optional[str]:
    """Share-intent URL for ``target``; ``None`` for clipboard copies."""
    text = quote(share_text(result, target), safe="")

    if target == ShareTarget.COPY:
        return None
    elif target == ShareTarget.WHATSAPP:
        return f"https://wa.me/?text={text}"
    elif target == ShareTarget.TELEGRAM:
        return f"https://t.me/share/url?url={quote(page_url or '', safe='')}&text={text}"
    else:  # TWITTER
        return f"https://twitter.com/intent/tweet?text={text}"


def share_result(
    result: CalculationResult,
    target: ShareTarget,
    page_url: Optional[str] = None,
) -> ShareResponse:
    return ShareResponse(
        target=target,
        text=share_text(result, target),
        url=share_url(result, target, page_url),
    )
