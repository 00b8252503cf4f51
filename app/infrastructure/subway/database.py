"""
Database schema and engine construction for the subway catalog.

Tables are declared with SQLAlchemy Core so the same schema works on
SQLite (local development, tests) and PostgreSQL. On SQLite, foreign
keys are switched on for every connection and row IDs are never
reused after a delete.
"""

import logging

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

metadata = MetaData()

stations_table = Table(
    "stations",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    sqlite_autoincrement=True,
)

lines_table = Table(
    "lines",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, unique=True),
    Column("color", String(64), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("modified_at", DateTime(timezone=True), nullable=False),
    sqlite_autoincrement=True,
)

sections_table = Table(
    "sections",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("line_id", Integer, ForeignKey("lines.id"), nullable=False, index=True),
    Column("up_station_id", Integer, ForeignKey("stations.id"), nullable=False),
    Column("down_station_id", Integer, ForeignKey("stations.id"), nullable=False),
    Column("distance", Integer, nullable=False),
    CheckConstraint("distance > 0", name="ck_sections_distance_positive"),
    CheckConstraint(
        "up_station_id <> down_station_id", name="ck_sections_distinct_stations"
    ),
    sqlite_autoincrement=True,
)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across FastAPI's worker threads,
    so the same-thread check is disabled for them. SQLite also ignores
    foreign keys unless asked per connection.
    """
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {}
    if is_sqlite:
        connect_args["check_same_thread"] = False
    engine = create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_schema(engine: Engine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    metadata.create_all(engine)
    logger.info("Database schema ready (%s).", engine.url.render_as_string(hide_password=True))
