"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st

from orchestra.application.ports.ai_advisor import AiAdvisorPort
from orchestra.application.ports.integrations import IntegrationFeedPort
from orchestra.application.use_cases.ask_assistant import AskAssistantUseCase
from orchestra.application.use_cases.categorize_transactions import (
    CategorizeTransactionsUseCase,
)
from orchestra.application.use_cases.constants import (
    ACTION_ITEMS_VIEW,
    DASHBOARD_VIEWS,
)
from orchestra.application.use_cases.dashboard_session import DashboardSession
from orchestra.application.use_cases.generate_investor_report import (
    GenerateInvestorReportUseCase,
)
from orchestra.application.use_cases.get_executive_briefing import (
    ExecutiveBriefing,
    GetExecutiveBriefingUseCase,
)
from orchestra.application.use_cases.simulate_scenario import (
    SimulateScenarioUseCase,
)
from orchestra.application.use_cases.sync_integration import (
    SyncIntegrationUseCase,
    UploadTransactionsUseCase,
)
from orchestra.adapters.interface.streamlit.cashflow_chart import (
    build_cashflow_chart,
)
from orchestra.domain.constants import RUNWAY_SENTINEL_MONTHS
from orchestra.domain.models import Alert, Transaction
from orchestra.domain.services.narrative import DemoStep
from orchestra.infrastructure.container import (
    build_ai_advisor,
    build_dashboard_session,
    build_integration_feed,
)
from orchestra.infrastructure.logging.logger import get_usage_logger
from orchestra.utils.decimal_utils import format_money

SESSION_KEY = "dashboard_session"
BRIEFING_KEY = "executive_briefing"
REPORT_KEY = "investor_report"
SCENARIO_KEY = "scenario_outcome"
CHAT_KEY = "chat_messages"
ADVISOR_KEY = "ai_advisor"
VIEW_KEY = "active_view"
PRIVACY_KEY = "privacy_mode"
PRIVACY_MASK = "•••••••"

GREETING = (
    "Hello! I'm your Orchestra CFO Agent. Ask me about your runway, "
    "burn rate, or recent expenses."
)
QUICK_SCENARIOS = (
    "Hire a Sales Manager ($8k/mo)",
    "Revenue drops by 20%",
    "Add 3 new clients ($5k MRR)",
    "Cut software costs by 15%",
)
VIEW_LABELS = {
    "discover": "Discover",
    "predict": "Predict",
    ACTION_ITEMS_VIEW: "Action Items",
    "guard": "Guard",
}
TOUR_COPY = {
    DemoStep.WELCOME: (
        "Founder Crisis Mode",
        "Imagine you're Lisa. Your cash is dropping fast. "
        "Let's find out why.",
    ),
    DemoStep.ACTION: (
        "Spotting the Risk",
        "See that red alert? Open 'Action Items' to see what the AI found.",
    ),
    DemoStep.RESOLVE: (
        "The Fix",
        "Resolve the unusual outflow and watch your runway recover.",
    ),
}
SEVERITY_ICONS = {"high": "🔴", "medium": "🟠", "low": "🟢"}


def _load_advisor() -> AiAdvisorPort:
    """Return the advisor of the current browser session.

    Each session gets its own single-flight guard, so a call in flight in
    one session never rejects a call from another.
    """
    if ADVISOR_KEY not in st.session_state:
        st.session_state[ADVISOR_KEY] = build_ai_advisor()
    return st.session_state[ADVISOR_KEY]


@st.cache_resource(show_spinner=False)
def _load_feed() -> IntegrationFeedPort:
    """Cached simulated integration feed."""
    return build_integration_feed()


def _get_session() -> DashboardSession:
    """Return the session stored in ``st.session_state``."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = build_dashboard_session()
    return st.session_state[SESSION_KEY]


def _format_runway(runway: Decimal) -> str:
    """Format runway months, showing the sentinel as unlimited."""
    if runway >= RUNWAY_SENTINEL_MONTHS:
        return "∞"
    return f"{runway:.1f} mo"


def _display_money(value: Decimal, private: bool = False) -> str:
    """Format money, masked when privacy mode is on."""
    return PRIVACY_MASK if private else format_money(value)


def _alert_label(alert: Alert) -> str:
    """Return the display label for an alert row."""
    icon = SEVERITY_ICONS.get(alert.severity.value, "")
    return f"{icon} {alert.message} · {alert.date}"


def _transaction_rows(
    transactions: Sequence[Transaction],
    query: str = "",
    private: bool = False,
) -> list[dict[str, str | float]]:
    """Return table rows filtered on description or category."""
    needle = query.strip().lower()
    rows = []
    for txn in transactions:
        if needle and not (
            needle in txn.description.lower()
            or needle in txn.category.lower()
        ):
            continue
        rows.append(
            {
                "Date": txn.date,
                "Description": txn.description,
                "Amount": PRIVACY_MASK if private else float(txn.amount),
                "Category": txn.category,
                "Status": txn.status.value,
                "Risk": "" if txn.risk_score is None else f"{txn.risk_score:.0f}",
                "Anomaly": "⚠️" if txn.is_anomaly else "",
            }
        )
    return rows


def _reset_insights() -> None:
    """Drop cached advisor output after the data changed."""
    for key in (BRIEFING_KEY, REPORT_KEY):
        st.session_state.pop(key, None)


def _render_tour(session: DashboardSession) -> None:
    """Render the demo tour prompt for the current step."""
    if not session.demo_mode or session.demo_step not in TOUR_COPY:
        return
    title, body = TOUR_COPY[session.demo_step]
    st.info(f"**{title}**  \n{body}")
    if session.demo_step == DemoStep.WELCOME:
        if st.button("Let's go", key="tour_dismiss"):
            session.dismiss_welcome()
            st.rerun()


def _render_metrics(session: DashboardSession, private: bool = False) -> None:
    """Render balance, burn and runway."""
    metrics = session.metrics
    balance_col, burn_col, runway_col = st.columns(3)
    balance_col.metric(
        "Cash Balance", _display_money(metrics.balance, private)
    )
    burn_col.metric(
        "Monthly Burn", _display_money(metrics.monthly_burn, private)
    )
    runway_col.metric("Runway", _format_runway(metrics.runway))


def _render_alerts(session: DashboardSession) -> None:
    """Render open alerts with resolve buttons.

    During the demo tour the buttons stay disabled until the tour reaches
    the resolve step.
    """
    locked = session.demo_mode and session.demo_step in (
        DemoStep.WELCOME,
        DemoStep.ACTION,
    )
    open_alerts = [a for a in session.snapshot.alerts if not a.resolved]
    st.subheader(f"Action Items ({len(open_alerts)})")
    if not open_alerts:
        st.success("All clear. No open alerts.")
        return
    if locked:
        st.caption("Follow the tour to resolve alerts.")
    for alert in open_alerts:
        text_col, button_col = st.columns([5, 1])
        text_col.write(_alert_label(alert))
        if button_col.button(
            "Resolve",
            key=f"resolve_{alert.id}",
            disabled=locked,
        ):
            get_usage_logger().info(f"resolve_alert {alert.id}")
            session.resolve_alert(alert.id)
            _reset_insights()
            st.rerun()


def _render_briefing(session: DashboardSession, advisor: AiAdvisorPort) -> None:
    """Render the executive summary and suggested actions."""
    if BRIEFING_KEY not in st.session_state:
        with st.spinner("Analyzing financial data..."):
            st.session_state[BRIEFING_KEY] = GetExecutiveBriefingUseCase(
                session=session,
                advisor=advisor,
            ).execute()
    briefing: ExecutiveBriefing = st.session_state[BRIEFING_KEY]
    st.subheader("AI Briefing")
    st.write(briefing.summary)
    if briefing.actions:
        st.caption("Suggested Actions")
        for item in briefing.actions:
            st.write(f"**{item.action}** · {item.impact} ({item.type.value})")


def _render_report(session: DashboardSession, advisor: AiAdvisorPort) -> None:
    """Render the investor report generator."""
    if st.button("Export investor report"):
        get_usage_logger().info("generate_investor_report")
        with st.spinner("Drafting report..."):
            st.session_state[REPORT_KEY] = GenerateInvestorReportUseCase(
                session=session,
                advisor=advisor,
            ).execute()
    if REPORT_KEY in st.session_state:
        st.text_area(
            "Investor update",
            st.session_state[REPORT_KEY],
            height=320,
        )


def _render_dashboard(
    session: DashboardSession,
    advisor: AiAdvisorPort,
    private: bool = False,
) -> None:
    """Render the main dashboard page."""
    _render_tour(session)
    _render_metrics(session, private)

    view = st.radio(
        "View",
        options=list(DASHBOARD_VIEWS),
        format_func=lambda key: VIEW_LABELS[key],
        horizontal=True,
        label_visibility="collapsed",
    )
    if view != st.session_state.get(VIEW_KEY):
        st.session_state[VIEW_KEY] = view
        previous_step = session.demo_step
        session.open_view(view)
        if session.demo_step != previous_step:
            st.rerun()

    st.altair_chart(
        build_cashflow_chart(session.snapshot.cashflow),
        use_container_width=True,
    )
    if view == ACTION_ITEMS_VIEW:
        _render_alerts(session)
    else:
        _render_briefing(session, advisor)
    _render_report(session, advisor)


def _render_transactions(
    session: DashboardSession,
    advisor: AiAdvisorPort,
    private: bool = False,
) -> None:
    """Render the transaction ledger and AI categorization."""
    st.subheader("Transaction Ledger")
    query = st.text_input("Filter", placeholder="Description or category")
    if st.button("AI Categorize"):
        get_usage_logger().info("categorize_transactions")
        with st.spinner("Analyzing transactions..."):
            updated = CategorizeTransactionsUseCase(
                session=session,
                advisor=advisor,
            ).execute()
        _reset_insights()
        st.toast(f"{updated} transactions analysed")
    rows = _transaction_rows(session.snapshot.transactions, query, private)
    st.caption(f"{len(rows)} transactions shown")
    st.dataframe(rows, hide_index=True, use_container_width=True)


def _render_forecasting(
    session: DashboardSession,
    advisor: AiAdvisorPort,
) -> None:
    """Render the scenario lab."""
    st.subheader("Scenario Lab")
    quick = st.selectbox("Quick scenarios", ["", *QUICK_SCENARIOS])
    scenario = st.text_area("Simulation parameters", value=quick)
    run_col, reset_col = st.columns(2)
    if run_col.button("Run simulation"):
        get_usage_logger().info(f"simulate_scenario {scenario!r}")
        with st.spinner("Simulating..."):
            outcome = SimulateScenarioUseCase(
                session=session,
                advisor=advisor,
            ).execute(scenario)
        if outcome is None:
            st.warning("Describe a scenario first.")
        else:
            st.session_state[SCENARIO_KEY] = outcome
    if reset_col.button("Reset"):
        st.session_state.pop(SCENARIO_KEY, None)

    outcome = st.session_state.get(SCENARIO_KEY)
    series = outcome.series if outcome else session.snapshot.cashflow
    st.altair_chart(build_cashflow_chart(series), use_container_width=True)
    if outcome:
        st.write(outcome.explanation)


def _render_integrations(
    session: DashboardSession,
    feed: IntegrationFeedPort,
) -> None:
    """Render integration statuses, sync buttons and file upload."""
    st.subheader("Data Connections")
    for integration in session.snapshot.integrations:
        name_col, state_col, button_col = st.columns([3, 2, 1])
        name_col.write(f"**{integration.name}** ({integration.type.value})")
        state_col.write(
            f"{integration.status.value} · {integration.last_synced}"
        )
        if button_col.button("Sync", key=f"sync_{integration.name}"):
            get_usage_logger().info(f"sync_integration {integration.name}")
            with st.spinner(f"Syncing {integration.name}..."):
                SyncIntegrationUseCase(session=session, feed=feed).execute(
                    integration.name
                )
            _reset_insights()
            st.rerun()

    uploaded = st.file_uploader(
        "Upload transactions",
        type=["csv", "xlsx"],
    )
    if st.button("Process upload"):
        filename = uploaded.name if uploaded is not None else None
        get_usage_logger().info(f"upload_transactions {filename}")
        with st.spinner("Processing file..."):
            result = UploadTransactionsUseCase(
                session=session,
                feed=feed,
            ).execute(filename)
        _reset_insights()
        st.success(f"Data processed: {len(result.imported)} transactions")


def _render_assistant(
    session: DashboardSession,
    advisor: AiAdvisorPort,
) -> None:
    """Render the chat assistant."""
    st.subheader("CFO Agent")
    if CHAT_KEY not in st.session_state:
        st.session_state[CHAT_KEY] = [("assistant", GREETING)]
    for role, text in st.session_state[CHAT_KEY]:
        with st.chat_message(role):
            st.write(text)

    message = st.chat_input("Ask about runway, burn or expenses")
    if message:
        get_usage_logger().info("chat_message")
        with st.spinner("Thinking..."):
            reply = AskAssistantUseCase(
                session=session,
                advisor=advisor,
            ).execute(message)
        if reply is not None:
            st.session_state[CHAT_KEY].append(("user", message))
            st.session_state[CHAT_KEY].append(("assistant", reply))
            st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Orchestra AI CFO", layout="wide")
    st.title("Orchestra")

    session = _get_session()
    advisor = _load_advisor()

    demo_enabled = st.sidebar.toggle("Demo mode", value=session.demo_mode)
    if demo_enabled != session.demo_mode:
        session.set_demo_mode(demo_enabled)
        _reset_insights()
        st.rerun()
    private = st.sidebar.toggle("Privacy mode", value=False, key=PRIVACY_KEY)

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Transactions", "Forecasting", "Integrations",
         "Assistant"],
    )
    if page == "Dashboard":
        _render_dashboard(session, advisor, private)
    elif page == "Transactions":
        _render_transactions(session, advisor, private)
    elif page == "Forecasting":
        _render_forecasting(session, advisor)
    elif page == "Integrations":
        _render_integrations(session, _load_feed())
    else:
        _render_assistant(session, advisor)


if __name__ == "__main__":  # pragma: no cover
    main()
