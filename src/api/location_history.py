"""
Location history store: one SQLite table, one row per (device_id, lat, lon).

Rows are only ever inserted. A repeated save for a known triple is absorbed
by the UNIQUE constraint (INSERT OR IGNORE), so callers never pre-check and
first_used keeps its original value. Every device can read every row; the
device id is a partition key, not a credential.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from src.config import HISTORY_DB_FILE
from src.errors import PersistenceError
from src.models import Location, LocationHistoryRecord

logger = logging.getLogger("weatherdash")

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS location_history (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    device_id TEXT NOT NULL,
    city_name TEXT NOT NULL,
    state TEXT,
    country TEXT NOT NULL,
    lat REAL NOT NULL,
    lon REAL NOT NULL,
    display_name TEXT NOT NULL,
    first_used TEXT NOT NULL,
    UNIQUE (device_id, lat, lon)
);
CREATE INDEX IF NOT EXISTS idx_location_history_device
    ON location_history (device_id, first_used DESC);
"""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LocationHistoryStore:
    def __init__(
        self,
        db_path: Path | str = HISTORY_DB_FILE,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.db_path = Path(db_path)
        self._clock = clock
        self._initialized = False

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self, conn: sqlite3.Connection) -> None:
        if not self._initialized:
            conn.executescript(SCHEMA_SQL)
            self._initialized = True

    def insert_if_absent(self, record: LocationHistoryRecord) -> bool:
        """Insert the record unless its key exists. True when a row was created."""
        try:
            conn = self._connect()
            try:
                self._init_db(conn)
                cursor = conn.execute(
                    """
                    INSERT OR IGNORE INTO location_history
                    (device_id, city_name, state, country, lat, lon, display_name, first_used)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        record.device_id,
                        record.city_name,
                        record.state,
                        record.country,
                        record.lat,
                        record.lon,
                        record.display_name,
                        record.first_used.isoformat(),
                    ),
                )
                conn.commit()
                return cursor.rowcount == 1
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"saving {record.display_name!r} failed: {e}") from e

    def save(self, device_id: str, location: Location) -> bool:
        record = LocationHistoryRecord.for_location(device_id, location, self._clock())
        created = self.insert_if_absent(record)
        if created:
            logger.info("History: saved %s for device %s", record.display_name, device_id)
        else:
            logger.debug("History: %s already known for device %s", record.display_name, device_id)
        return created

    def list_by_device(self, device_id: str) -> list[LocationHistoryRecord]:
        """All records of one device, most recently first used first."""
        try:
            conn = self._connect()
            try:
                self._init_db(conn)
                rows = conn.execute(
                    """
                    SELECT device_id, city_name, state, country, lat, lon, display_name, first_used
                    FROM location_history
                    WHERE device_id = ?
                    ORDER BY first_used DESC, id DESC
                    """,
                    (device_id,),
                ).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"listing history failed: {e}") from e

        return [
            LocationHistoryRecord(
                device_id=row["device_id"],
                city_name=row["city_name"],
                state=row["state"],
                country=row["country"],
                lat=row["lat"],
                lon=row["lon"],
                display_name=row["display_name"],
                first_used=datetime.fromisoformat(row["first_used"]),
            )
            for row in rows
        ]
