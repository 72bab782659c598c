"""Gemini-backed implementation of the AI advisor port.

Each operation builds its prompt, calls the model and maps the reply back
to domain objects. Structured operations ask for JSON against a declared
schema and validate the reply with pydantic before use. No exception
leaves this module: failures are logged and replaced by the operation's
safe default from ``ai_defaults``.
"""

from collections.abc import Sequence
from decimal import Decimal

import google.generativeai as genai

from orchestra.domain.models import (
    Alert,
    AssistantContext,
    CashflowPoint,
    FinancialMetrics,
    ScenarioForecast,
    StrategicAction,
    Transaction,
    TransactionAnalysis,
)
from orchestra.infrastructure import ai_defaults, ai_prompts
from orchestra.infrastructure.ai_schemas import (
    FORECAST_SCHEMA,
    STRATEGIC_ACTIONS_SCHEMA,
    TRANSACTION_ANALYSIS_SCHEMA,
    parse_forecast,
    parse_strategic_actions,
    parse_transaction_analysis,
)
from orchestra.infrastructure.logging.logger import get_app_logger
from orchestra.infrastructure.settings import DEFAULT_MODEL

SUMMARY_MAX_OUTPUT_TOKENS = 200
SUMMARY_TEMPERATURE = 0.4


class GeminiAiAdvisor:
    """AiAdvisorPort implementation calling Google Gemini."""

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_MODEL,
        model=None,
        logger=None,
    ) -> None:
        """Initialize the advisor.

        Args:
            api_key: Gemini API key.
            model_name: Gemini model to use.
            model: Optional pre-built model exposing ``generate_content``;
                when omitted a ``genai.GenerativeModel`` is created.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        if model is None:
            genai.configure(api_key=api_key)
            model = genai.GenerativeModel(model_name)
        self._model = model
        self._model_name = model_name
        self._logger = logger or get_app_logger()

    def executive_summary(
        self,
        balance: Decimal,
        monthly_burn: Decimal,
        runway: Decimal,
        alerts: Sequence[Alert],
    ) -> str:
        prompt = ai_prompts.executive_summary_prompt(
            balance, monthly_burn, runway, alerts
        )
        config = genai.GenerationConfig(
            max_output_tokens=SUMMARY_MAX_OUTPUT_TOKENS,
            temperature=SUMMARY_TEMPERATURE,
        )
        try:
            text = self._generate(prompt, config)
        except Exception as exc:
            self._log_failure("executive_summary", exc)
            return ai_defaults.SUMMARY_UNAVAILABLE
        return text or ai_defaults.SUMMARY_EMPTY

    def investor_report(
        self,
        metrics: FinancialMetrics,
        cashflow: Sequence[CashflowPoint],
    ) -> str:
        prompt = ai_prompts.investor_report_prompt(metrics, cashflow)
        try:
            text = self._generate(prompt)
        except Exception as exc:
            self._log_failure("investor_report", exc)
            return ai_defaults.REPORT_UNAVAILABLE
        return text or ai_defaults.REPORT_UNAVAILABLE

    def strategic_actions(
        self,
        transactions: Sequence[Transaction],
    ) -> list[StrategicAction]:
        prompt = ai_prompts.strategic_actions_prompt(transactions)
        try:
            text = self._generate(
                prompt,
                self._json_config(STRATEGIC_ACTIONS_SCHEMA),
            )
            return parse_strategic_actions(text)
        except Exception as exc:
            self._log_failure("strategic_actions", exc)
            return []

    def analyze_transactions(
        self,
        transactions: Sequence[Transaction],
    ) -> list[TransactionAnalysis]:
        if not transactions:
            return []
        prompt = ai_prompts.transaction_analysis_prompt(transactions)
        try:
            text = self._generate(
                prompt,
                self._json_config(TRANSACTION_ANALYSIS_SCHEMA),
            )
            return parse_transaction_analysis(text)
        except Exception as exc:
            self._log_failure("analyze_transactions", exc)
            return []

    def forecast_scenario(
        self,
        history: Sequence[CashflowPoint],
        scenario: str,
    ) -> ScenarioForecast:
        prompt = ai_prompts.forecast_prompt(history, scenario)
        try:
            text = self._generate(prompt, self._json_config(FORECAST_SCHEMA))
            return parse_forecast(text)
        except Exception as exc:
            self._log_failure("forecast_scenario", exc)
            return ai_defaults.unavailable_forecast(history)

    def chat(self, message: str, context: AssistantContext) -> str:
        prompt = ai_prompts.chat_prompt(message, context)
        try:
            text = self._generate(prompt)
        except Exception as exc:
            self._log_failure("chat", exc)
            return ai_defaults.CHAT_APOLOGY
        return text or ai_defaults.CHAT_EMPTY

    def _generate(self, prompt: str, config=None) -> str:
        """Call the model and return its stripped text.

        ``response.text`` raises ValueError when the reply was blocked or
        carries no parts; callers treat that like any other failure.
        """
        if config is None:
            response = self._model.generate_content(prompt)
        else:
            response = self._model.generate_content(
                prompt,
                generation_config=config,
            )
        return (response.text or "").strip()

    @staticmethod
    def _json_config(schema: dict) -> genai.GenerationConfig:
        return genai.GenerationConfig(
            response_mime_type="application/json",
            response_schema=schema,
        )

    def _log_failure(self, operation: str, exc: Exception) -> None:
        self._logger.error(
            f"Gemini {operation} failed on {self._model_name}: "
            f"{type(exc).__name__}: {exc}"
        )


__all__ = ["GeminiAiAdvisor"]
