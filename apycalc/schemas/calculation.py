"""Data contracts for interest calculations."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


class CompoundingMethod(str, Enum):
    """How an annual percentage is turned into daily and monthly earnings."""

    # nominal rate / 365, compounded daily for every horizon
    NOMINAL_DAILY = "nominal_daily"
    # equivalent daily rate derived from the APY, year taken from the APY directly
    APY_DAILY = "apy_daily"


class ChartKind(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    DOUGHNUT = "doughnut"


class ShareTarget(str, Enum):
    COPY = "copy"
    WHATSAPP = "whatsapp"
    TELEGRAM = "telegram"
    TWITTER = "twitter"


class ExportFormat(str, Enum):
    CSV = "csv"
    PDF = "pdf"


RawNumber = Optional[Union[StrictFloat, StrictInt, StrictStr]]


class CalculationInput(BaseModel):
    """Validated inputs handed to the interest engine."""

    model_config = ConfigDict(frozen=True)

    principal: float = Field(..., gt=0, description="Initial amount invested.")
    apy: float = Field(
        ...,
        gt=0,
        description="Annual percentage yield, expressed as a percentage (e.g. 5 for 5%).",
    )


class CalculationResult(BaseModel):
    """Projected earnings for a single principal/APY pair."""

    principal: float = Field(..., ge=0)
    apy: float = Field(..., ge=0)
    method: CompoundingMethod = CompoundingMethod.NOMINAL_DAILY
    dayEarn: float = Field(..., ge=0)
    monthEarn: float = Field(..., ge=0)
    yearEarn: float = Field(..., ge=0)
    total: float = Field(..., ge=0, description="Principal plus one year of earnings.")


class FormattedResult(BaseModel):
    """Display strings for a result, with thousands separators."""

    principal: str
    apy: str
    dayEarn: str
    monthEarn: str
    yearEarn: str
    total: str


class CalculationRequest(BaseModel):
    """Raw form values as typed by the user; validation happens afterwards."""

    model_config = ConfigDict(extra="forbid")

    apy: RawNumber = Field(None, description="APY as typed, thousands separators allowed.")
    amount: RawNumber = Field(None, description="Principal as typed, thousands separators allowed.")
    method: Optional[CompoundingMethod] = None


class CalculationResponse(BaseModel):
    result: CalculationResult
    summary: str
    formatted: FormattedResult


class ChartRequest(CalculationRequest):
    kind: ChartKind = ChartKind.BAR
    render: bool = Field(False, description="Include a base64 PNG rendering of the chart.")


class ChartPayload(BaseModel):
    """Series a client-side chart library can draw directly."""

    kind: ChartKind
    labels: List[str]
    values: List[float]
    image: Optional[str] = None


class ShareRequest(CalculationRequest):
    target: ShareTarget
    pageUrl: Optional[str] = None


class ShareResponse(BaseModel):
    target: ShareTarget
    text: str
    url: Optional[str] = None


class ExportRequest(CalculationRequest):
    format: ExportFormat
