"""
Adapter: Line repository.

Implements LineRepository port.
Persists lines in the ``lines`` table and their sections in the
``sections`` table. Section order is not stored: it is rebuilt from
the chain itself when a line is loaded.
"""

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from app.domain.subway.entities import Line, Section, Sections, Station
from app.domain.subway.errors import DuplicateLineNameError
from app.domain.subway.ports import LineRepository
from app.infrastructure.subway.database import (
    lines_table,
    sections_table,
    stations_table,
)

logger = logging.getLogger(__name__)

_up = stations_table.alias("up_station")
_down = stations_table.alias("down_station")

_SECTION_QUERY = select(
    sections_table.c.id,
    sections_table.c.line_id,
    sections_table.c.distance,
    _up.c.id.label("up_id"),
    _up.c.name.label("up_name"),
    _down.c.id.label("down_id"),
    _down.c.name.label("down_name"),
).select_from(
    sections_table.join(_up, sections_table.c.up_station_id == _up.c.id).join(
        _down, sections_table.c.down_station_id == _down.c.id
    )
)


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way back; stored values are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _row_to_section(row) -> Section:
    return Section(
        up_station=Station(id=row.up_id, name=row.up_name),
        down_station=Station(id=row.down_id, name=row.down_name),
        distance=row.distance,
        line_id=row.line_id,
        id=row.id,
    )


def _row_to_line(row, sections: list[Section]) -> Line:
    return Line(
        id=row.id,
        name=row.name,
        color=row.color,
        sections=Sections.from_unordered(sections),
        created_at=_as_utc(row.created_at),
        modified_at=_as_utc(row.modified_at),
    )


class LineRepositoryAdapter(LineRepository):
    """SQL implementation of the line repository.

    Every write runs inside a single ``engine.begin()`` transaction so
    a line never ends up with a half-written section delta.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, line: Line) -> Line:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    insert(lines_table).values(
                        name=line.name,
                        color=line.color,
                        created_at=line.created_at,
                        modified_at=line.modified_at,
                    )
                )
                line_id = result.inserted_primary_key[0]
                self._insert_sections(conn, line_id, list(line.sections))
        except IntegrityError as exc:
            self._raise_if_name_taken(line, exc)
            raise

        logger.debug("Inserted line id=%d with %d section(s).", line_id, len(line.sections))
        return self.get_by_id(line_id)

    def get_by_id(self, line_id: int) -> Optional[Line]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(lines_table).where(lines_table.c.id == line_id)
            ).first()
            if row is None:
                return None
            section_rows = conn.execute(
                _SECTION_QUERY.where(sections_table.c.line_id == line_id)
            ).fetchall()

        return _row_to_line(row, [_row_to_section(r) for r in section_rows])

    def list_all(self) -> list[Line]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(lines_table).order_by(lines_table.c.id)).fetchall()
            section_rows = conn.execute(_SECTION_QUERY).fetchall()

        by_line: dict[int, list[Section]] = defaultdict(list)
        for section_row in section_rows:
            by_line[section_row.line_id].append(_row_to_section(section_row))

        return [_row_to_line(row, by_line[row.id]) for row in rows]

    def exists_by_name(self, name: str) -> bool:
        query = select(lines_table.c.id).where(lines_table.c.name == name).limit(1)
        with self._engine.connect() as conn:
            return conn.execute(query).first() is not None

    def save(self, line: Line) -> Line:
        """Write line metadata and the section delta in one transaction.

        Sections without an ID are inserted; stored sections that are no
        longer part of the line are deleted. Untouched rows stay as is.
        A rename that collides with another line raises
        ``DuplicateLineNameError`` and writes nothing.
        """
        kept_ids = {s.id for s in line.sections if s.id is not None}
        new_sections = [s for s in line.sections if s.id is None]

        try:
            with self._engine.begin() as conn:
                conn.execute(
                    update(lines_table)
                    .where(lines_table.c.id == line.id)
                    .values(
                        name=line.name,
                        color=line.color,
                        modified_at=line.modified_at,
                    )
                )

                stored_ids = set(
                    conn.execute(
                        select(sections_table.c.id).where(sections_table.c.line_id == line.id)
                    ).scalars()
                )
                removed_ids = stored_ids - kept_ids
                if removed_ids:
                    conn.execute(
                        delete(sections_table).where(
                            sections_table.c.id.in_(sorted(removed_ids))
                        )
                    )
                self._insert_sections(conn, line.id, new_sections)
        except IntegrityError as exc:
            self._raise_if_name_taken(line, exc)
            raise

        logger.debug(
            "Saved line id=%d: +%d / -%d section(s).",
            line.id,
            len(new_sections),
            len(removed_ids),
        )
        return self.get_by_id(line.id)

    def delete(self, line_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(sections_table).where(sections_table.c.line_id == line_id))
            conn.execute(delete(lines_table).where(lines_table.c.id == line_id))

    def _raise_if_name_taken(self, line: Line, exc: IntegrityError) -> None:
        """Translate a unique-name violation into the domain error.

        Another writer may have taken the name between the use case's
        check and this write. Other integrity failures propagate as is.
        """
        query = select(lines_table.c.id).where(lines_table.c.name == line.name)
        if line.id is not None:
            query = query.where(lines_table.c.id != line.id)
        with self._engine.connect() as conn:
            taken = conn.execute(query.limit(1)).first() is not None
        if taken:
            logger.warning("Line name %r was taken concurrently.", line.name)
            raise DuplicateLineNameError(line.name) from exc

    @staticmethod
    def _insert_sections(
        conn: Connection, line_id: int, sections: list[Section]
    ) -> None:
        if not sections:
            return
        conn.execute(
            insert(sections_table),
            [
                {
                    "line_id": line_id,
                    "up_station_id": s.up_station.id,
                    "down_station_id": s.down_station.id,
                    "distance": s.distance,
                }
                for s in sections
            ],
        )
