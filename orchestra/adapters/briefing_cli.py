"""CLI adapter printing the executive briefing for a fresh session.

This module wires the session and the configured AI advisor to the
GetExecutiveBriefingUseCase and prints the result to stdout.
"""

from orchestra.application.use_cases.get_executive_briefing import (
    GetExecutiveBriefingUseCase,
)
from orchestra.infrastructure.container import (
    build_ai_advisor,
    build_dashboard_session,
)
from orchestra.infrastructure.logging.logger import get_app_logger
from orchestra.utils.decimal_utils import format_money


def main() -> None:
    """Print headline metrics, the summary and suggested actions."""
    logger = get_app_logger()
    session = build_dashboard_session()
    advisor = build_ai_advisor()
    use_case = GetExecutiveBriefingUseCase(
        session=session,
        advisor=advisor,
        logger=logger,
    )

    briefing = use_case.execute()
    metrics = session.metrics

    print(f"Balance:      {format_money(metrics.balance)}")
    print(f"Monthly burn: {format_money(metrics.monthly_burn)}")
    print(f"Runway:       {metrics.runway:.1f} months")
    print()
    print(briefing.summary)
    if briefing.actions:
        print()
        print("Suggested actions:")
        for item in briefing.actions:
            print(f"- [{item.type.value}] {item.action} ({item.impact})")


if __name__ == "__main__":  # pragma: no cover
    main()
