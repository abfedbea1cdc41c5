"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from src.adapters.interface.streamlit.tables import (
    ACHIEVEMENT_COLUMNS,
    ORDER_COLUMNS,
    RECEIVABLE_COLUMNS,
    build_achievement_rows,
    build_level_chart_data,
    build_order_rows,
    build_project_rows,
    build_receivable_rows,
    format_currency,
    sort_indicator,
)
from src.application.use_cases.filters import (
    AchievementsFilter,
    OrdersFilter,
    ReceivablesFilter,
)
from src.application.use_cases.get_achievements import AchievementsOverview
from src.application.use_cases.get_project_summaries import DEFAULT_SORT
from src.application.use_cases.get_receivables_overview import (
    ReceivablesOverview,
)
from src.application.use_cases.table_sort import (
    SortState,
    sort_rows,
    toggle_sort,
)
from src.domain.models import (
    ClientType,
    OrderStatus,
    OverdueLevel,
    OverdueLevelAmount,
    PaymentStatus,
)
from src.domain.services.labels import label_for
from src.infrastructure.container import (
    build_achievements_use_case,
    build_project_summaries_use_case,
    build_receivables_overview_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import ErpSettings

ALL_OPTION = "전체"
ORDERS_SORT_KEY = "orders_sort"
RECEIVABLES_SORT_KEY = "receivables_sort"
ACHIEVEMENTS_SORT_KEY = "achievements_sort"
PAGES = ["수주", "채권", "실적"]


def _fetch_order_rows(
    filters: OrdersFilter,
    sort: SortState,
    view_mode: str,
) -> list:
    """Fetch project summaries or orders from the ERP database."""
    use_case = build_project_summaries_use_case()
    return use_case.execute(filters=filters, sort=sort, view_mode=view_mode)


@st.cache_data(show_spinner=False, ttl=300)
def _load_order_rows(
    filters: OrdersFilter,
    sort: SortState,
    view_mode: str,
) -> list:
    """Cached wrapper around _fetch_order_rows."""
    return _fetch_order_rows(filters, sort, view_mode)


def _fetch_receivables_overview(
    reference_date: date,
    filters: ReceivablesFilter,
) -> ReceivablesOverview:
    """Fetch classified receivables from the ERP database."""
    use_case = build_receivables_overview_use_case()
    return use_case.execute(reference_date=reference_date, filters=filters)


@st.cache_data(show_spinner=False, ttl=300)
def _load_receivables_overview(
    reference_date: date,
    filters: ReceivablesFilter,
) -> ReceivablesOverview:
    """Cached wrapper around _fetch_receivables_overview."""
    return _fetch_receivables_overview(reference_date, filters)


def _fetch_achievements(
    filters: AchievementsFilter,
    sort: SortState,
) -> AchievementsOverview:
    """Fetch achievements from the ERP database."""
    use_case = build_achievements_use_case()
    return use_case.execute(filters=filters, sort=sort)


@st.cache_data(show_spinner=False, ttl=300)
def _load_achievements(
    filters: AchievementsFilter,
    sort: SortState,
) -> AchievementsOverview:
    """Cached wrapper around _fetch_achievements."""
    return _fetch_achievements(filters, sort)


def _enum_option(label: str, enum_cls):
    """Map a selectbox label back to its enumeration member."""
    if label == ALL_OPTION:
        return None
    for member in enum_cls:
        if label_for(member) == label:
            return member
    return None


def _enum_select(label: str, enum_cls, key: str):
    """Render a selectbox over an enumeration with an "all" option."""
    options = [ALL_OPTION] + [label_for(member) for member in enum_cls]
    selected = st.selectbox(label, options=options, index=0, key=key)
    return _enum_option(selected, enum_cls)


def _get_sort_state(key: str, default: SortState) -> SortState:
    """Return the sort state kept in the session."""
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def _render_sort_controls(
    key: str,
    columns: dict[str, str],
    default: SortState,
) -> SortState:
    """Render one toggle button per column and return the sort state."""
    state = _get_sort_state(key, default)
    buttons = st.columns(len(columns))
    for slot, (column, header) in zip(buttons, columns.items()):
        caption = header + sort_indicator(
            column,
            state.column,
            state.direction,
        )
        if slot.button(caption, key=f"{key}:{column}"):
            state = toggle_sort(state, column)
            st.session_state[key] = state
            get_usage_logger().info(
                f"Sort {key} by {state.column} {state.direction}"
            )
    return state


def _render_level_chart(
    breakdown: Sequence[OverdueLevelAmount],
    currency_code: str,
) -> None:
    """Render a bar chart of overdue amounts per level."""
    data = build_level_chart_data(breakdown, currency_code)
    if not any(entry["count"] for entry in data):
        st.info("연체 채권이 없습니다.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=6,
        cornerRadiusTopRight=6,
    ).encode(
        x=alt.X(
            "level:N",
            sort=alt.EncodingSortField(field="severity", order="ascending"),
            title=None,
        ),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "level:N",
            scale=alt.Scale(
                range=["#457b9d", "#f6c453", "#f4a261", "#e76f51"]
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("description:N"),
            alt.Tooltip("count:Q"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(height=280)
    st.subheader("연체 단계별 미수금")
    st.altair_chart(chart, width="stretch")


def _render_orders_page(settings: ErpSettings) -> None:
    """Render the orders page, grouped by project by default."""
    st.subheader("수주 관리")
    search_term = st.text_input(
        "검색",
        placeholder="프로젝트명, 고객사, 수주번호",
    )
    client_type = _enum_select("구분", ClientType, key="orders_client_type")
    status = _enum_select("계약상태", OrderStatus, key="orders_status")
    period = st.date_input("계약일", value=(), key="orders_period")
    start_date = period[0] if len(period) > 0 else None
    end_date = period[1] if len(period) > 1 else None
    summary_mode = st.toggle("프로젝트별 요약", value=True)

    filters = OrdersFilter(
        search_term=search_term,
        client_type=client_type,
        status=status,
        start_date=start_date,
        end_date=end_date,
    )
    sort = _render_sort_controls(ORDERS_SORT_KEY, ORDER_COLUMNS, DEFAULT_SORT)
    view_mode = "summary" if summary_mode else "full"
    rows = _load_order_rows(filters, sort, view_mode)

    if summary_mode:
        data = build_project_rows(rows, settings.currency)
        st.caption(f"{len(rows)}개 프로젝트")
    else:
        data = build_order_rows(rows, settings.currency)
        st.caption(f"{len(rows)}건의 수주")
    if filters.active_count:
        st.caption(f"필터 {filters.active_count}개 적용 중")
    st.dataframe(data, width="stretch", hide_index=True)


def _render_receivables_page(settings: ErpSettings) -> None:
    """Render the receivables page with aging figures."""
    st.subheader("채권 관리")
    reference_date = st.sidebar.date_input(
        "기준일",
        value=settings.reference_date or date.today(),
    )
    search_term = st.text_input(
        "검색",
        placeholder="프로젝트명, 고객사, 채권번호, 수주번호",
    )
    filters = ReceivablesFilter(
        search_term=search_term,
        payment_status=_enum_select(
            "상태",
            PaymentStatus,
            key="receivables_status",
        ),
        client_type=_enum_select(
            "구분",
            ClientType,
            key="receivables_client_type",
        ),
        overdue_level=_enum_select(
            "연체단계",
            OverdueLevel,
            key="receivables_level",
        ),
    )
    overview = _load_receivables_overview(reference_date, filters)
    stats = overview.stats
    currency = settings.currency

    total_col, paid_col, overdue_col, bad_col = st.columns(4)
    total_col.metric(
        "총 채권액",
        format_currency(stats.total_amount, currency),
    )
    paid_col.metric(
        "수금액",
        format_currency(stats.paid_amount, currency),
        f"수금률 {stats.collection_rate_percent}%",
        delta_color="off",
    )
    overdue_col.metric(
        "연체금액",
        format_currency(stats.overdue_amount, currency),
        f"{stats.by_status[PaymentStatus.OVERDUE]}건 연체",
        delta_color="off",
    )
    bad_col.metric(
        "부실채권",
        f"{stats.by_overdue_level[OverdueLevel.BAD]}건",
    )

    _render_level_chart(overview.level_breakdown, currency)

    sort = _render_sort_controls(
        RECEIVABLES_SORT_KEY,
        RECEIVABLE_COLUMNS,
        SortState(),
    )
    receivables = sort_rows(overview.receivables, sort)
    st.caption(f"총 {len(receivables)}건의 채권이 있습니다.")
    st.dataframe(
        build_receivable_rows(receivables, currency),
        width="stretch",
        hide_index=True,
    )


def _render_achievements_page(settings: ErpSettings) -> None:
    """Render the achievements page."""
    st.subheader("실적 관리")
    search_term = st.text_input(
        "검색",
        placeholder="프로젝트명, 담당자, 비고",
    )
    selected_project = st.session_state.get(
        "achievements_project",
        ALL_OPTION,
    )
    client_type = _enum_select(
        "고객사 유형",
        ClientType,
        key="achievements_client_type",
    )
    status = _enum_select("상태", OrderStatus, key="achievements_status")
    period = st.date_input("실적일", value=(), key="achievements_period")
    filters = AchievementsFilter(
        search_term=search_term,
        project_name=None
        if selected_project == ALL_OPTION
        else selected_project,
        client_type=client_type,
        status=status,
        start_date=period[0] if len(period) > 0 else None,
        end_date=period[1] if len(period) > 1 else None,
    )
    sort = _render_sort_controls(
        ACHIEVEMENTS_SORT_KEY,
        ACHIEVEMENT_COLUMNS,
        SortState(),
    )
    overview = _load_achievements(filters, sort)
    st.selectbox(
        "프로젝트",
        options=[ALL_OPTION] + overview.project_names,
        index=0,
        key="achievements_project",
    )

    st.caption(
        f"총 {len(overview.achievements)}건, 금액 "
        f"{format_currency(overview.total_amount, settings.currency)}"
    )
    if not overview.achievements:
        st.info("조회된 실적이 없습니다.")
        return
    st.dataframe(
        build_achievement_rows(overview.achievements, settings.currency),
        width="stretch",
        hide_index=True,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="토양정화 ERP", layout="wide")
    st.title("토양정화 ERP")
    settings = ErpSettings.from_env()

    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"Page view: {page}")
    if page == "수주":
        _render_orders_page(settings)
    elif page == "채권":
        _render_receivables_page(settings)
    else:
        _render_achievements_page(settings)


if __name__ == "__main__":  # pragma: no cover
    main()
