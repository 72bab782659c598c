"""Response schemas for structured Gemini output.

Two views of each schema live here: the declaration sent with the request
(Gemini's OpenAPI subset) and the pydantic model that validates the reply
before it is mapped to domain objects. A reply that does not validate is
rejected as a whole.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from orchestra.domain.models import (
    ActionType,
    CashflowPoint,
    ScenarioForecast,
    StrategicAction,
    TransactionAnalysis,
)
from orchestra.infrastructure.ai_prompts import FORECAST_PERIODS
from orchestra.utils.decimal_utils import coerce_decimal

EXPECTED_ACTIONS = 3

STRATEGIC_ACTIONS_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "action": {"type": "STRING"},
            "impact": {"type": "STRING"},
            "type": {
                "type": "STRING",
                "format": "enum",
                "enum": [member.value for member in ActionType],
            },
        },
        "required": ["action", "impact", "type"],
    },
}

TRANSACTION_ANALYSIS_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "id": {"type": "STRING"},
            "category": {"type": "STRING"},
            "riskScore": {"type": "NUMBER"},
            "riskReason": {"type": "STRING"},
            "isAnomaly": {"type": "BOOLEAN"},
        },
        "required": ["id", "category", "riskScore", "isAnomaly"],
    },
}

FORECAST_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "explanation": {"type": "STRING"},
        "data": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "month": {"type": "STRING"},
                    "income": {"type": "NUMBER"},
                    "expenses": {"type": "NUMBER"},
                    "balance": {"type": "NUMBER"},
                    "projected": {"type": "BOOLEAN"},
                },
                "required": ["month", "income", "expenses", "balance"],
            },
        },
    },
    "required": ["explanation", "data"],
}


class StrategicActionPayload(BaseModel):
    action: str = Field(min_length=1)
    impact: str
    type: Literal["saving", "risk", "growth"]


class TransactionAnalysisPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    category: str = Field(min_length=1)
    risk_score: float = Field(alias="riskScore", ge=0, le=100)
    risk_reason: str | None = Field(default=None, alias="riskReason")
    is_anomaly: bool = Field(alias="isAnomaly")


class CashflowPointPayload(BaseModel):
    month: str
    income: float = Field(ge=0)
    expenses: float = Field(ge=0)
    balance: float
    projected: bool = True


class ForecastPayload(BaseModel):
    explanation: str
    data: list[CashflowPointPayload]


_ACTIONS_ADAPTER = TypeAdapter(list[StrategicActionPayload])
_ANALYSIS_ADAPTER = TypeAdapter(list[TransactionAnalysisPayload])


def parse_strategic_actions(text: str) -> list[StrategicAction]:
    """Validate and map a strategic-actions reply.

    Extra items beyond three are dropped; fewer than three is a mismatch.

    Raises:
        pydantic.ValidationError: When the JSON does not match the schema.
        ValueError: When fewer than three actions are returned.
    """
    payloads = _ACTIONS_ADAPTER.validate_json(text)
    if len(payloads) < EXPECTED_ACTIONS:
        raise ValueError(
            f"Expected {EXPECTED_ACTIONS} actions, got {len(payloads)}"
        )
    return [
        StrategicAction(
            action=item.action,
            impact=item.impact,
            type=ActionType(item.type),
        )
        for item in payloads[:EXPECTED_ACTIONS]
    ]


def parse_transaction_analysis(text: str) -> list[TransactionAnalysis]:
    """Validate and map a transaction-analysis reply.

    Raises:
        pydantic.ValidationError: When the JSON does not match the schema.
    """
    return [
        TransactionAnalysis(
            id=item.id,
            category=item.category,
            risk_score=item.risk_score,
            risk_reason=item.risk_reason,
            is_anomaly=item.is_anomaly,
        )
        for item in _ANALYSIS_ADAPTER.validate_json(text)
    ]


def parse_forecast(text: str) -> ScenarioForecast:
    """Validate and map a scenario-forecast reply.

    Every returned point is marked projected and only the first
    ``FORECAST_PERIODS`` are kept.

    Raises:
        pydantic.ValidationError: When the JSON does not match the schema.
        ValueError: When the reply covers fewer than ``FORECAST_PERIODS``
            periods.
    """
    payload = ForecastPayload.model_validate_json(text)
    if len(payload.data) < FORECAST_PERIODS:
        raise ValueError(
            f"Expected {FORECAST_PERIODS} forecast points, "
            f"got {len(payload.data)}"
        )
    return ScenarioForecast(
        explanation=payload.explanation,
        data=[
            CashflowPoint(
                month=point.month,
                income=coerce_decimal(point.income),
                expenses=coerce_decimal(point.expenses),
                balance=coerce_decimal(point.balance),
                projected=True,
            )
            for point in payload.data[:FORECAST_PERIODS]
        ],
    )


__all__ = [
    "STRATEGIC_ACTIONS_SCHEMA",
    "TRANSACTION_ANALYSIS_SCHEMA",
    "FORECAST_SCHEMA",
    "parse_strategic_actions",
    "parse_transaction_analysis",
    "parse_forecast",
]
