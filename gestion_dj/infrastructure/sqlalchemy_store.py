"""SQLAlchemy-backed data store.

Tables are created on first use. Events are read newest first; events
sharing a date keep their insertion order through the ``seq`` column.
"""

from contextlib import contextmanager
from dataclasses import asdict, replace
from typing import Iterator

from sqlalchemy import Boolean, Date, DateTime, bindparam, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.application.ports.database import DatabaseEnginePort
from gestion_dj.domain.errors import StoreUnavailableError, UserNotFoundError
from gestion_dj.domain.models import (
    Client,
    ClientDraft,
    Event,
    EventDraft,
    ExpenseItem,
    User,
    UserDraft,
    UserPatch,
)
from gestion_dj.infrastructure.identifiers import new_id, with_expense_ids
from gestion_dj.infrastructure.logging.logger import get_app_logger


CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        username TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        role TEXT NOT NULL,
        active_until TIMESTAMP NOT NULL,
        is_active BOOLEAN NOT NULL,
        subscription_tier TEXT,
        last_payment_amount INTEGER,
        password_change_required BOOLEAN NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS clients (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        phone TEXT,
        email TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS events (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        seq INTEGER NOT NULL,
        event_name TEXT NOT NULL,
        event_date DATE NOT NULL,
        location TEXT NOT NULL,
        client_id TEXT NOT NULL,
        income_category TEXT NOT NULL,
        amount_charged INTEGER NOT NULL,
        notes TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS expense_items (
        id TEXT PRIMARY KEY,
        event_id TEXT NOT NULL,
        position INTEGER NOT NULL,
        category TEXT NOT NULL,
        amount INTEGER NOT NULL
    )
    """,
)

_USER_COLUMNS = """
    id, username, password_hash, role, active_until, is_active,
    subscription_tier, last_payment_amount, password_change_required
"""
_USER_TYPES = {
    "active_until": DateTime,
    "is_active": Boolean,
    "password_change_required": Boolean,
}
_USER_BINDS = (
    bindparam("active_until", type_=DateTime),
    bindparam("is_active", type_=Boolean),
    bindparam("password_change_required", type_=Boolean),
)

SELECT_USERS_SQL = text(
    f"SELECT {_USER_COLUMNS} FROM users ORDER BY username"
).columns(**_USER_TYPES)

SELECT_USER_SQL = text(
    f"SELECT {_USER_COLUMNS} FROM users WHERE id = :id"
).columns(**_USER_TYPES)

INSERT_USER_SQL = text(
    """
    INSERT INTO users (
        id, username, password_hash, role, active_until, is_active,
        subscription_tier, last_payment_amount, password_change_required
    )
    VALUES (
        :id, :username, :password_hash, :role, :active_until, :is_active,
        :subscription_tier, :last_payment_amount, :password_change_required
    )
    """
).bindparams(*_USER_BINDS)

UPDATE_USER_SQL = text(
    """
    UPDATE users SET
        username = :username,
        password_hash = :password_hash,
        role = :role,
        active_until = :active_until,
        is_active = :is_active,
        subscription_tier = :subscription_tier,
        last_payment_amount = :last_payment_amount,
        password_change_required = :password_change_required
    WHERE id = :id
    """
).bindparams(*_USER_BINDS)

SELECT_CLIENTS_SQL = text(
    """
    SELECT id, name, phone, email
    FROM clients
    WHERE user_id = :user_id
    ORDER BY name, id
    """
)

INSERT_CLIENT_SQL = text(
    """
    INSERT INTO clients (id, user_id, name, phone, email)
    VALUES (:id, :user_id, :name, :phone, :email)
    """
)

UPDATE_CLIENT_SQL = text(
    """
    UPDATE clients SET name = :name, phone = :phone, email = :email
    WHERE id = :id
    """
)

DELETE_CLIENT_SQL = text("DELETE FROM clients WHERE id = :id")

SELECT_EVENTS_SQL = text(
    """
    SELECT id, event_name, event_date, location, client_id,
           income_category, amount_charged, notes
    FROM events
    WHERE user_id = :user_id
    ORDER BY event_date DESC, seq ASC
    """
).columns(event_date=Date)

SELECT_EXPENSES_SQL = text(
    """
    SELECT x.id, x.event_id, x.category, x.amount
    FROM expense_items x
    JOIN events e ON e.id = x.event_id
    WHERE e.user_id = :user_id
    ORDER BY x.event_id, x.position
    """
)

NEXT_EVENT_SEQ_SQL = text("SELECT COALESCE(MAX(seq), 0) + 1 FROM events")

INSERT_EVENT_SQL = text(
    """
    INSERT INTO events (
        id, user_id, seq, event_name, event_date, location, client_id,
        income_category, amount_charged, notes
    )
    VALUES (
        :id, :user_id, :seq, :event_name, :event_date, :location,
        :client_id, :income_category, :amount_charged, :notes
    )
    """
).bindparams(bindparam("event_date", type_=Date))

UPDATE_EVENT_SQL = text(
    """
    UPDATE events SET
        event_name = :event_name,
        event_date = :event_date,
        location = :location,
        client_id = :client_id,
        income_category = :income_category,
        amount_charged = :amount_charged,
        notes = :notes
    WHERE id = :id
    """
).bindparams(bindparam("event_date", type_=Date))

DELETE_EVENT_SQL = text("DELETE FROM events WHERE id = :id")

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expense_items (id, event_id, position, category, amount)
    VALUES (:id, :event_id, :position, :category, :amount)
    """
)

DELETE_EXPENSES_SQL = text("DELETE FROM expense_items WHERE event_id = :id")

DELETE_PARTITION_EXPENSES_SQL = text(
    """
    DELETE FROM expense_items
    WHERE event_id IN (SELECT id FROM events WHERE user_id = :user_id)
    """
)
DELETE_PARTITION_EVENTS_SQL = text(
    "DELETE FROM events WHERE user_id = :user_id"
)
DELETE_PARTITION_CLIENTS_SQL = text(
    "DELETE FROM clients WHERE user_id = :user_id"
)


class SqlAlchemyDataStore(DataStorePort):
    """Data store persisting users and partitions through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the application engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._schema_ready = False

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction.

        Driver failures are logged and reported as StoreUnavailableError.
        """
        try:
            engine = self._db_port.get_engine()
            if not self._schema_ready:
                with engine.begin() as conn:
                    for statement in CREATE_TABLES_SQL:
                        conn.exec_driver_sql(statement)
                self._schema_ready = True
            with engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            self._logger.error(f"Data store failure: {exc}")
            raise StoreUnavailableError() from exc

    def get_users(self) -> list[User]:
        with self._connection() as conn:
            rows = conn.execute(SELECT_USERS_SQL).all()
        return [self._user_from_row(row) for row in rows]

    def get_user(self, user_id: str) -> User | None:
        with self._connection() as conn:
            row = conn.execute(SELECT_USER_SQL, {"id": user_id}).first()
        return self._user_from_row(row) if row is not None else None

    def create_user(self, draft: UserDraft) -> User:
        user = User(id=new_id(), **asdict(draft))
        with self._connection() as conn:
            conn.execute(INSERT_USER_SQL, self._user_params(user))
        self._logger.info(f"Stored user {user.username}")
        return user

    def update_user(self, user_id: str, patch: UserPatch) -> User:
        with self._connection() as conn:
            row = conn.execute(SELECT_USER_SQL, {"id": user_id}).first()
            if row is None:
                raise UserNotFoundError()
            user = replace(self._user_from_row(row), **patch.changes())
            conn.execute(UPDATE_USER_SQL, self._user_params(user))
        return user

    def get_events(self, user_id: str) -> list[Event]:
        params = {"user_id": user_id}
        with self._connection() as conn:
            rows = conn.execute(SELECT_EVENTS_SQL, params).all()
            expense_rows = conn.execute(SELECT_EXPENSES_SQL, params).all()

        expenses: dict[str, list[ExpenseItem]] = {}
        for row in expense_rows:
            expenses.setdefault(row.event_id, []).append(
                ExpenseItem(
                    id=row.id,
                    category=row.category,
                    amount=row.amount,
                )
            )
        return [
            Event(
                id=row.id,
                name=row.event_name,
                date=row.event_date,
                location=row.location,
                client_id=row.client_id,
                income_category=row.income_category,
                amount_charged=row.amount_charged,
                expenses=tuple(expenses.get(row.id, [])),
                notes=row.notes,
            )
            for row in rows
        ]

    def create_event(self, user_id: str, draft: EventDraft) -> Event:
        event = Event(
            id=new_id(),
            name=draft.name,
            date=draft.date,
            location=draft.location,
            client_id=draft.client_id,
            income_category=draft.income_category,
            amount_charged=draft.amount_charged,
            expenses=with_expense_ids(draft.expenses),
            notes=draft.notes,
        )
        with self._connection() as conn:
            seq = conn.execute(NEXT_EVENT_SEQ_SQL).scalar_one()
            self._insert_event(conn, user_id, event, seq)
        return event

    def update_event(self, event: Event) -> Event:
        event = replace(event, expenses=with_expense_ids(event.expenses))
        with self._connection() as conn:
            result = conn.execute(UPDATE_EVENT_SQL, self._event_params(event))
            if result.rowcount == 0:
                raise KeyError(f"Unknown event: {event.id}")
            conn.execute(DELETE_EXPENSES_SQL, {"id": event.id})
            self._insert_expenses(conn, event)
        return event

    def delete_event(self, event_id: str) -> None:
        with self._connection() as conn:
            conn.execute(DELETE_EXPENSES_SQL, {"id": event_id})
            conn.execute(DELETE_EVENT_SQL, {"id": event_id})

    def get_clients(self, user_id: str) -> list[Client]:
        with self._connection() as conn:
            rows = conn.execute(SELECT_CLIENTS_SQL, {"user_id": user_id}).all()
        return [
            Client(id=row.id, name=row.name, phone=row.phone, email=row.email)
            for row in rows
        ]

    def create_client(self, user_id: str, draft: ClientDraft) -> Client:
        client = Client(
            id=new_id(),
            name=draft.name,
            phone=draft.phone,
            email=draft.email,
        )
        with self._connection() as conn:
            conn.execute(
                INSERT_CLIENT_SQL,
                {"user_id": user_id, **self._client_params(client)},
            )
        return client

    def update_client(self, client: Client) -> Client:
        with self._connection() as conn:
            result = conn.execute(
                UPDATE_CLIENT_SQL,
                self._client_params(client),
            )
            if result.rowcount == 0:
                raise KeyError(f"Unknown client: {client.id}")
        return client

    def delete_client(self, client_id: str) -> None:
        with self._connection() as conn:
            conn.execute(DELETE_CLIENT_SQL, {"id": client_id})

    def replace_partition(
        self,
        user_id: str,
        events: list[Event],
        clients: list[Client],
    ) -> None:
        """Swap the partition content in a single transaction."""
        params = {"user_id": user_id}
        with self._connection() as conn:
            conn.execute(DELETE_PARTITION_EXPENSES_SQL, params)
            conn.execute(DELETE_PARTITION_EVENTS_SQL, params)
            conn.execute(DELETE_PARTITION_CLIENTS_SQL, params)
            if clients:
                conn.execute(
                    INSERT_CLIENT_SQL,
                    [
                        {"user_id": user_id, **self._client_params(client)}
                        for client in clients
                    ],
                )
            seq = conn.execute(NEXT_EVENT_SEQ_SQL).scalar_one()
            for offset, event in enumerate(events):
                self._insert_event(conn, user_id, event, seq + offset)
        self._logger.info(
            f"Replaced partition of user {user_id}: "
            f"{len(events)} events, {len(clients)} clients"
        )

    def _insert_event(
        self,
        conn: Connection,
        user_id: str,
        event: Event,
        seq: int,
    ) -> None:
        conn.execute(
            INSERT_EVENT_SQL,
            {"user_id": user_id, "seq": seq, **self._event_params(event)},
        )
        self._insert_expenses(conn, event)

    @staticmethod
    def _insert_expenses(conn: Connection, event: Event) -> None:
        if not event.expenses:
            return
        conn.execute(
            INSERT_EXPENSE_SQL,
            [
                {
                    "id": item.id,
                    "event_id": event.id,
                    "position": position,
                    "category": item.category,
                    "amount": item.amount,
                }
                for position, item in enumerate(event.expenses)
            ],
        )

    @staticmethod
    def _event_params(event: Event) -> dict[str, object]:
        return {
            "id": event.id,
            "event_name": event.name,
            "event_date": event.date,
            "location": event.location,
            "client_id": event.client_id,
            "income_category": event.income_category,
            "amount_charged": event.amount_charged,
            "notes": event.notes,
        }

    @staticmethod
    def _client_params(client: Client) -> dict[str, object]:
        return {
            "id": client.id,
            "name": client.name,
            "phone": client.phone,
            "email": client.email,
        }

    @staticmethod
    def _user_params(user: User) -> dict[str, object]:
        return {
            "id": user.id,
            "username": user.username,
            "password_hash": user.password_hash,
            "role": user.role,
            "active_until": user.active_until,
            "is_active": user.is_active,
            "subscription_tier": user.subscription_tier,
            "last_payment_amount": user.last_payment_amount,
            "password_change_required": user.password_change_required,
        }

    @staticmethod
    def _user_from_row(row) -> User:
        return User(
            id=row.id,
            username=row.username,
            password_hash=row.password_hash,
            role=row.role,
            active_until=row.active_until,
            is_active=bool(row.is_active),
            subscription_tier=row.subscription_tier,
            last_payment_amount=row.last_payment_amount,
            password_change_required=bool(row.password_change_required),
        )


__all__ = ["SqlAlchemyDataStore"]
