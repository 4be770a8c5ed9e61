"""Streamlit entry point for the DJ management app."""

import json
import math
from collections.abc import Sequence
from datetime import date, datetime

import altair as alt
import streamlit as st

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.application.ports.password_hasher import PasswordHasherPort
from gestion_dj.application.use_cases import (
    AddUserUseCase,
    AuthenticateUseCase,
    ChangePasswordUseCase,
    DeleteClientUseCase,
    DeleteEventUseCase,
    ExportBackupUseCase,
    GetCalendarUseCase,
    GetDashboardUseCase,
    GetReportUseCase,
    GetUserStatsUseCase,
    ImportBackupUseCase,
    ListEventsUseCase,
    LoadWorkspaceUseCase,
    SaveClientUseCase,
    SaveEventUseCase,
    ToggleUserActiveUseCase,
    UpdateUserUseCase,
    Workspace,
)
from gestion_dj.domain.constants import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    SUBSCRIPTION_TIERS,
)
from gestion_dj.domain.errors import (
    GestionError,
    InvalidAmountError,
    MalformedImportDocumentError,
)
from gestion_dj.domain.models import (
    CategoryAmount,
    Client,
    ClientDraft,
    CreateClient,
    CreateEvent,
    DashboardView,
    Event,
    EventDraft,
    EventListItem,
    ExpenseItem,
    ReportView,
    TrendPoint,
    UpdateClient,
    UpdateEvent,
    User,
)
from gestion_dj.domain.services.formatting import (
    format_currency,
    format_day,
    report_title,
)
from gestion_dj.domain.services.subscription import (
    LEVEL_WARNING,
    is_subscription_expired,
    subscription_warning_for,
)
from gestion_dj.infrastructure.container import (
    build_data_store,
    build_password_hasher,
)
from gestion_dj.infrastructure.logging.logger import get_app_logger
from gestion_dj.infrastructure.settings import AppSettings
from gestion_dj.utils.dates import end_of_day

SESSION_USER_KEY = "user"
SESSION_WORKSPACE_KEY = "workspace"

USER_PAGES = [
    "Dashboard",
    "Eventos",
    "Calendario",
    "Clientes",
    "Reportes",
    "Respaldo",
]
ADMIN_PAGES = ["Usuarios"]
WEEKDAY_HEADERS = ["Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb"]
SETUP_REQUIRED_MESSAGE = (
    "No hay usuarios registrados. Ejecute gestion-dj-setup para crear el "
    "administrador inicial."
)


@st.cache_resource(show_spinner=False)
def _get_settings() -> AppSettings:
    """Read the settings once per server process."""
    return AppSettings.from_env()


@st.cache_resource(show_spinner=False)
def _get_data_store() -> DataStorePort:
    """Build the data store once per server process."""
    return build_data_store(_get_settings())


@st.cache_resource(show_spinner=False)
def _get_password_hasher() -> PasswordHasherPort:
    return build_password_hasher()


def _setup_pending() -> bool:
    """Tell the operator to run the setup CLI while no user exists."""
    if _get_data_store().get_users():
        return False
    st.warning(SETUP_REQUIRED_MESSAGE)
    return True


def _sign_in(username: str, password: str) -> User:
    use_case = AuthenticateUseCase(
        data_store=_get_data_store(),
        password_hasher=_get_password_hasher(),
    )
    return use_case.execute(username, password)


def _load_workspace(user: User) -> Workspace:
    return LoadWorkspaceUseCase(_get_data_store()).execute(user)


def _refresh_workspace() -> None:
    """Reload the session snapshot, keeping the old one on failure."""
    user = st.session_state[SESSION_USER_KEY]
    previous = st.session_state.get(SESSION_WORKSPACE_KEY) or Workspace()
    st.session_state[SESSION_WORKSPACE_KEY] = LoadWorkspaceUseCase(
        _get_data_store()
    ).refresh(user, previous)


def _sign_out() -> None:
    st.session_state.pop(SESSION_USER_KEY, None)
    st.session_state.pop(SESSION_WORKSPACE_KEY, None)


def _format_profit_change(value: float) -> str:
    """Format the month-over-month profit change for a metric delta."""
    return f"{value:+.1f}%"


def _trend_chart_data(
    trend: Sequence[TrendPoint],
) -> list[dict[str, str | int]]:
    """Prepare the twelve-month net profit series for Altair.

    Args:
        trend: Points ordered from the oldest month to the current one.

    Returns:
        Altair-ready rows keeping the input order in ``position``.
    """
    return [
        {
            "position": index,
            "month": point.label,
            "net_profit": point.net_profit,
            "net_profit_label": format_currency(point.net_profit),
        }
        for index, point in enumerate(trend)
    ]


def _category_chart_data(
    items: Sequence[CategoryAmount],
) -> list[dict[str, str | int]]:
    return [
        {
            "category": item.category,
            "amount": item.amount,
            "amount_label": format_currency(item.amount),
        }
        for item in items
    ]


def _event_rows(items: Sequence[EventListItem]) -> list[dict[str, str]]:
    """Build the rows of the events table."""
    return [
        {
            "Fecha": format_day(item.event.date),
            "Evento": item.event.name,
            "Cliente": item.client_name,
            "Lugar": item.event.location,
            "Categoría": item.event.income_category,
            "Cobrado": format_currency(item.event.amount_charged),
            "Gastos": format_currency(item.event.total_expenses),
            "Ganancia": format_currency(item.event.profit),
        }
        for item in items
    ]


def _client_rows(clients: Sequence[Client]) -> list[dict[str, str]]:
    return [
        {
            "Nombre": client.name,
            "Teléfono": client.phone or "",
            "Email": client.email or "",
        }
        for client in clients
    ]


def _user_rows(
    users: Sequence[User],
    now: datetime,
) -> list[dict[str, str]]:
    """Build the rows of the admin users table."""
    rows = []
    for user in users:
        if not user.is_active:
            status = "Desactivado"
        elif is_subscription_expired(user.active_until, now):
            status = "Vencido"
        else:
            status = "Activo"
        payment = user.last_payment_amount
        rows.append(
            {
                "Usuario": user.username,
                "Rol": user.role,
                "Estado": status,
                "Vence": format_day(user.active_until.date()),
                "Plan": user.subscription_tier or "",
                "Último pago": (
                    format_currency(payment) if payment is not None else ""
                ),
            }
        )
    return rows


def _is_blank_amount(amount: object) -> bool:
    if amount is None or amount == "":
        return True
    return isinstance(amount, float) and math.isnan(amount)


def _whole_amount(amount: object) -> int:
    """Convert an edited amount to guaraníes, refusing fractions."""
    if isinstance(amount, bool):
        raise InvalidAmountError()
    try:
        value = float(amount)
    except (TypeError, ValueError) as exc:
        raise InvalidAmountError() from exc
    if not value.is_integer() or value < 0:
        raise InvalidAmountError()
    return int(value)


def _expenses_from_rows(
    rows: Sequence[dict[str, object]],
) -> tuple[ExpenseItem, ...]:
    """Turn edited expense rows into expense items.

    Rows without a category or with an empty amount are ignored. Existing
    ids are kept so updates preserve them; new rows get one from the store.

    Raises:
        InvalidAmountError: If an amount is fractional or negative.
    """
    expenses = []
    for row in rows:
        category = row.get("category")
        amount = row.get("amount")
        if not category or _is_blank_amount(amount):
            continue
        expenses.append(
            ExpenseItem(
                id=str(row.get("id") or ""),
                category=str(category),
                amount=_whole_amount(amount),
            )
        )
    return tuple(expenses)


def _decode_backup(raw: bytes) -> object:
    """Decode an uploaded backup file.

    Raises:
        MalformedImportDocumentError: If the content is not UTF-8 JSON.
    """
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedImportDocumentError() from exc


def _render_subscription_banner(user: User, now: datetime) -> None:
    warning = subscription_warning_for(user, now)
    if warning is None:
        return
    if warning.level == LEVEL_WARNING:
        st.warning(warning.message)
    else:
        st.error(warning.message)


def _render_login() -> None:
    st.subheader("Iniciar sesión")
    with st.form("login"):
        username = st.text_input("Usuario")
        password = st.text_input("Contraseña", type="password")
        submitted = st.form_submit_button("Ingresar")
    if not submitted:
        return
    try:
        user = _sign_in(username, password)
        workspace = _load_workspace(user)
    except GestionError as exc:
        st.error(exc.message)
        return
    st.session_state[SESSION_USER_KEY] = user
    st.session_state[SESSION_WORKSPACE_KEY] = workspace
    st.rerun()


def _render_password_change(user: User, forced: bool = False) -> None:
    st.subheader("Cambiar contraseña")
    if forced:
        st.info("Debe cambiar su contraseña antes de continuar.")
    with st.form("change_password"):
        password = st.text_input("Nueva contraseña", type="password")
        confirmation = st.text_input("Confirmar contraseña", type="password")
        submitted = st.form_submit_button("Guardar")
    if not submitted:
        return
    use_case = ChangePasswordUseCase(
        data_store=_get_data_store(),
        password_hasher=_get_password_hasher(),
    )
    try:
        updated = use_case.execute(user.id, password, confirmation)
    except GestionError as exc:
        st.error(exc.message)
        return
    st.session_state[SESSION_USER_KEY] = updated
    st.success("Contraseña actualizada.")
    st.rerun()


def _render_trend_chart(trend: Sequence[TrendPoint]) -> None:
    data = _trend_chart_data(trend)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X(
            "month:N",
            sort=alt.EncodingSortField(field="position", order="ascending"),
            title=None,
        ),
        y=alt.Y("net_profit:Q", title="Ganancia neta"),
        color=alt.condition(
            alt.datum.net_profit >= 0,
            alt.value("#2e7d32"),
            alt.value("#e76f51"),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("net_profit_label:N"),
        ],
    )
    st.subheader("Ganancia neta, últimos 12 meses")
    st.altair_chart(chart, width="stretch")


def _render_category_chart(
    items: Sequence[CategoryAmount],
    title: str,
    chart_size: int = 300,
) -> None:
    """Render a donut chart of current-month amounts by category.

    Args:
        items: Category totals in first-seen order.
        title: Chart title to display above the donut.
        chart_size: Width/height for the chart canvas.
    """
    st.subheader(title)
    if not items:
        st.info("Sin movimientos este mes.")
        return
    chart = alt.Chart(
        alt.Data(values=_category_chart_data(items))
    ).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _render_dashboard(user: User) -> None:
    view: DashboardView = GetDashboardUseCase(_get_data_store()).execute(
        user.id
    )
    income_col, expense_col, profit_col, count_col = st.columns(4)
    income_col.metric("Ingresos del mes", format_currency(view.current.income))
    expense_col.metric(
        "Gastos del mes",
        format_currency(view.current.expense),
    )
    profit_col.metric(
        "Ganancia neta",
        format_currency(view.current.net_profit),
        _format_profit_change(view.profit_change),
    )
    count_col.metric("Eventos del mes", view.current.count)
    _render_trend_chart(view.trend)
    income_chart, expense_chart = st.columns(2)
    with income_chart:
        _render_category_chart(view.breakdown.income, "Ingresos por categoría")
    with expense_chart:
        _render_category_chart(view.breakdown.expense, "Gastos por categoría")


def _render_event_form(
    user: User,
    clients: Sequence[Client],
    event: Event | None = None,
) -> None:
    """Render the create or edit form of an event."""
    if not clients:
        st.info("Registre un cliente antes de cargar eventos.")
        return
    client_ids = [client.id for client in clients]
    names = {client.id: client.name for client in clients}
    key = f"event_form_{event.id if event else 'new'}"
    with st.form(key):
        name = st.text_input("Nombre", value=event.name if event else "")
        event_date = st.date_input(
            "Fecha",
            value=event.date if event else date.today(),
        )
        location = st.text_input(
            "Lugar",
            value=event.location if event else "",
        )
        client_id = st.selectbox(
            "Cliente",
            options=client_ids,
            index=(
                client_ids.index(event.client_id)
                if event and event.client_id in client_ids
                else 0
            ),
            format_func=lambda value: names[value],
        )
        income_category = st.selectbox(
            "Categoría",
            options=list(INCOME_CATEGORIES),
            index=(
                INCOME_CATEGORIES.index(event.income_category)
                if event and event.income_category in INCOME_CATEGORIES
                else 0
            ),
        )
        amount_charged = st.number_input(
            "Monto cobrado",
            min_value=0,
            step=1,
            value=event.amount_charged if event else 0,
        )
        expense_rows = st.data_editor(
            [
                {
                    "id": expense.id,
                    "category": expense.category,
                    "amount": expense.amount,
                }
                for expense in (event.expenses if event else ())
            ]
            or [{"id": "", "category": None, "amount": None}],
            num_rows="dynamic",
            column_config={
                "id": None,
                "category": st.column_config.SelectboxColumn(
                    "Categoría de gasto",
                    options=list(EXPENSE_CATEGORIES),
                ),
                "amount": st.column_config.NumberColumn(
                    "Monto",
                    min_value=0,
                    step=1,
                ),
            },
            key=f"{key}_expenses",
        )
        notes = st.text_area(
            "Notas",
            value=(event.notes or "") if event else "",
        )
        submitted = st.form_submit_button("Guardar")
    if not submitted:
        return

    try:
        expenses = _expenses_from_rows(expense_rows)
    except GestionError as exc:
        st.error(exc.message)
        return
    if event is None:
        command = CreateEvent(
            draft=EventDraft(
                name=name.strip(),
                date=event_date,
                location=location.strip(),
                client_id=client_id,
                income_category=income_category,
                amount_charged=int(amount_charged),
                expenses=expenses,
                notes=notes.strip() or None,
            )
        )
    else:
        command = UpdateEvent(
            event=Event(
                id=event.id,
                name=name.strip(),
                date=event_date,
                location=location.strip(),
                client_id=client_id,
                income_category=income_category,
                amount_charged=int(amount_charged),
                expenses=expenses,
                notes=notes.strip() or None,
            )
        )
    try:
        SaveEventUseCase(_get_data_store()).execute(user.id, command)
    except GestionError as exc:
        st.error(exc.message)
        return
    _refresh_workspace()
    st.success("Evento guardado.")
    st.rerun()


def _render_events(user: User, workspace: Workspace) -> None:
    st.subheader("Eventos")
    search_col, start_col, end_col = st.columns([2, 1, 1])
    search_term = search_col.text_input(
        "Buscar",
        placeholder="Evento, cliente o lugar",
    )
    start_date = start_col.date_input("Desde", value=None)
    end_date = end_col.date_input("Hasta", value=None)

    items = ListEventsUseCase(_get_data_store()).execute(
        user.id,
        start_date=start_date,
        end_date=end_date,
        search_term=search_term,
    )
    st.caption(f"{len(items)} eventos")
    st.dataframe(_event_rows(items), width="stretch", hide_index=True)

    with st.expander("Nuevo evento"):
        _render_event_form(user, workspace.clients)

    if not workspace.events:
        return
    events = {event.id: event for event in workspace.events}
    selected = st.selectbox(
        "Editar evento",
        options=list(events),
        format_func=lambda value: (
            f"{format_day(events[value].date)} - {events[value].name}"
        ),
    )
    _render_event_form(user, workspace.clients, events[selected])
    if st.button("Eliminar evento"):
        DeleteEventUseCase(_get_data_store()).execute(user.id, selected)
        _refresh_workspace()
        st.rerun()


def _render_calendar(user: User) -> None:
    st.subheader("Calendario")
    today = date.today()
    year_col, month_col = st.columns(2)
    year = int(year_col.number_input("Año", value=today.year, step=1))
    month = int(
        month_col.number_input(
            "Mes",
            min_value=1,
            max_value=12,
            value=today.month,
            step=1,
        )
    )
    calendar_month = GetCalendarUseCase(_get_data_store()).execute(
        user.id,
        year,
        month,
    )
    for column, header in zip(st.columns(7), WEEKDAY_HEADERS):
        column.markdown(f"**{header}**")
    cells: list[int | None] = [None] * calendar_month.leading_blanks
    cells.extend(range(1, calendar_month.days_in_month + 1))
    for week_start in range(0, len(cells), 7):
        columns = st.columns(7)
        for column, day in zip(columns, cells[week_start:week_start + 7]):
            if day is None:
                continue
            column.markdown(f"**{day}**")
            for event in calendar_month.events_by_day.get(
                date(year, month, day),
                [],
            ):
                column.caption(event.name)


def _render_clients(user: User, workspace: Workspace) -> None:
    st.subheader("Clientes")
    st.dataframe(
        _client_rows(workspace.clients),
        width="stretch",
        hide_index=True,
    )
    with st.form("new_client"):
        name = st.text_input("Nombre")
        phone = st.text_input("Teléfono")
        email = st.text_input("Email")
        submitted = st.form_submit_button("Agregar cliente")
    if submitted:
        command = CreateClient(
            draft=ClientDraft(
                name=name,
                phone=phone.strip() or None,
                email=email.strip() or None,
            )
        )
        try:
            SaveClientUseCase(_get_data_store()).execute(user.id, command)
        except GestionError as exc:
            st.error(exc.message)
        else:
            _refresh_workspace()
            st.rerun()

    if not workspace.clients:
        return
    clients = {client.id: client for client in workspace.clients}
    selected = st.selectbox(
        "Cliente",
        options=list(clients),
        format_func=lambda value: clients[value].name,
    )
    client = clients[selected]
    with st.form(f"edit_client_{client.id}"):
        name = st.text_input("Nombre", value=client.name)
        phone = st.text_input("Teléfono", value=client.phone or "")
        email = st.text_input("Email", value=client.email or "")
        save_col, delete_col = st.columns(2)
        save = save_col.form_submit_button("Guardar cambios")
        delete = delete_col.form_submit_button("Eliminar cliente")
    try:
        if save:
            SaveClientUseCase(_get_data_store()).execute(
                user.id,
                UpdateClient(
                    client=Client(
                        id=client.id,
                        name=name,
                        phone=phone.strip() or None,
                        email=email.strip() or None,
                    )
                ),
            )
        elif delete:
            DeleteClientUseCase(_get_data_store()).execute(
                user.id,
                client.id,
            )
        else:
            return
    except GestionError as exc:
        st.error(exc.message)
        return
    _refresh_workspace()
    st.rerun()


def _render_report_view(report: ReportView) -> None:
    st.subheader(report_title(report.start_date, report.end_date))
    summary = report.summary
    count_col, charged_col, expense_col, profit_col = st.columns(4)
    count_col.metric("Eventos", summary.event_count)
    charged_col.metric("Cobrado", format_currency(summary.total_charged))
    expense_col.metric("Gastos", format_currency(summary.total_expenses))
    profit_col.metric("Ganancia neta", format_currency(summary.net_profit))

    clients_col, events_col = st.columns(2)
    with clients_col:
        st.markdown("**Clientes más frecuentes**")
        st.dataframe(
            [
                {"Cliente": item.name, "Eventos": item.count}
                for item in report.top_clients
            ],
            width="stretch",
            hide_index=True,
        )
    with events_col:
        st.markdown("**Eventos más rentables**")
        st.dataframe(
            [
                {
                    "Evento": item.name,
                    "Ganancia": format_currency(item.profit),
                }
                for item in report.top_events
            ],
            width="stretch",
            hide_index=True,
        )


def _render_reports(user: User) -> None:
    today = date.today()
    start_col, end_col = st.columns(2)
    start_date = start_col.date_input(
        "Desde",
        value=today.replace(day=1),
        key="report_start",
    )
    end_date = end_col.date_input("Hasta", value=today, key="report_end")
    if not st.button("Generar reporte"):
        return
    report = GetReportUseCase(_get_data_store()).execute(
        user.id,
        start_date,
        end_date,
    )
    _render_report_view(report)


def _render_backup(user: User) -> None:
    st.subheader("Respaldo")
    document = ExportBackupUseCase(_get_data_store()).execute(user.id)
    st.download_button(
        "Exportar datos",
        data=json.dumps(document, ensure_ascii=False, indent=2),
        file_name=f"respaldo_{date.today():%Y%m%d}.json",
        mime="application/json",
    )
    uploaded = st.file_uploader("Importar respaldo", type=["json"])
    if uploaded is None or not st.button("Importar"):
        return
    try:
        events, clients = ImportBackupUseCase(_get_data_store()).execute(
            user.id,
            _decode_backup(uploaded.getvalue()),
        )
    except GestionError as exc:
        st.error(exc.message)
        return
    _refresh_workspace()
    st.success(f"Se importaron {events} eventos y {clients} clientes.")


def _render_users(workspace: Workspace) -> None:
    st.subheader("Usuarios")
    stats = GetUserStatsUseCase(_get_data_store()).execute()
    total_col, active_col, inactive_col = st.columns(3)
    total_col.metric("Total", stats.total)
    active_col.metric("Activos", stats.active)
    inactive_col.metric("Inactivos", stats.inactive)
    st.dataframe(
        _user_rows(workspace.users, datetime.now()),
        width="stretch",
        hide_index=True,
    )

    with st.form("new_user"):
        username = st.text_input("Usuario")
        password = st.text_input("Contraseña", type="password")
        active_until = st.date_input("Activo hasta", value=date.today())
        tier = st.selectbox("Plan", options=["", *SUBSCRIPTION_TIERS])
        payment = st.number_input("Último pago", min_value=0, step=1)
        submitted = st.form_submit_button("Agregar usuario")
    if submitted:
        use_case = AddUserUseCase(
            data_store=_get_data_store(),
            password_hasher=_get_password_hasher(),
        )
        try:
            use_case.execute(
                username,
                password,
                end_of_day(active_until),
                subscription_tier=tier or None,
                last_payment_amount=int(payment) or None,
            )
        except GestionError as exc:
            st.error(exc.message)
        else:
            _refresh_workspace()
            st.rerun()

    accounts = {
        user.id: user for user in workspace.users if not user.is_admin
    }
    if not accounts:
        return
    selected = st.selectbox(
        "Cuenta",
        options=list(accounts),
        format_func=lambda value: accounts[value].username,
    )
    account = accounts[selected]
    with st.form(f"edit_user_{account.id}"):
        new_password = st.text_input(
            "Nueva contraseña (opcional)",
            type="password",
        )
        new_until = st.date_input(
            "Activo hasta",
            value=account.active_until.date(),
        )
        new_tier = st.selectbox(
            "Plan",
            options=list(SUBSCRIPTION_TIERS),
            index=(
                SUBSCRIPTION_TIERS.index(account.subscription_tier)
                if account.subscription_tier in SUBSCRIPTION_TIERS
                else 0
            ),
        )
        new_payment = st.number_input(
            "Último pago",
            min_value=0,
            step=1,
            value=account.last_payment_amount or 0,
        )
        save_col, toggle_col = st.columns(2)
        save = save_col.form_submit_button("Guardar cambios")
        toggle = toggle_col.form_submit_button(
            "Desactivar" if account.is_active else "Activar"
        )
    try:
        if save:
            UpdateUserUseCase(
                data_store=_get_data_store(),
                password_hasher=_get_password_hasher(),
            ).execute(
                account.id,
                password=new_password or None,
                active_until=end_of_day(new_until),
                subscription_tier=new_tier,
                last_payment_amount=int(new_payment),
            )
        elif toggle:
            ToggleUserActiveUseCase(_get_data_store()).execute(account.id)
        else:
            return
    except GestionError as exc:
        st.error(exc.message)
        return
    _refresh_workspace()
    st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Gestión DJ", layout="wide")
    st.title("Gestión DJ")
    logger = get_app_logger()

    user = st.session_state.get(SESSION_USER_KEY)
    if user is None:
        try:
            if _setup_pending():
                return
        except GestionError as exc:
            logger.error(f"User lookup failed: {exc.message}")
            st.error(exc.message)
            return
        _render_login()
        return

    if st.sidebar.button("Cerrar sesión"):
        _sign_out()
        st.rerun()
    st.sidebar.caption(f"Sesión: {user.username}")

    if user.password_change_required:
        _render_password_change(user, forced=True)
        return

    _render_subscription_banner(user, datetime.now())
    workspace = st.session_state.get(SESSION_WORKSPACE_KEY) or Workspace()
    pages = ADMIN_PAGES if user.is_admin else USER_PAGES
    page = st.sidebar.selectbox("Página", [*pages, "Contraseña"])

    try:
        if page == "Contraseña":
            _render_password_change(user)
        elif page == "Usuarios":
            _render_users(workspace)
        elif page == "Dashboard":
            _render_dashboard(user)
        elif page == "Eventos":
            _render_events(user, workspace)
        elif page == "Calendario":
            _render_calendar(user)
        elif page == "Clientes":
            _render_clients(user, workspace)
        elif page == "Reportes":
            _render_reports(user)
        else:
            _render_backup(user)
    except GestionError as exc:
        logger.error(f"Page {page} failed: {exc.message}")
        st.error(exc.message)


if __name__ == "__main__":  # pragma: no cover
    main()
