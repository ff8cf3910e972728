"""
Data-access object for the ``flight`` table.

All queries use parameterized statements.  Every method opens its own
connection, commits any write and closes the connection before
returning; SQLite errors are propagated to the caller unchanged.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Protocol

from flight_records_api.app.core.db import get_connection
from flight_records_api.app.schemas.flight import FlightCreate, FlightRead


logger = logging.getLogger(__name__)


class FlightStore(Protocol):
    """Persistence operations the flight service relies on."""

    def insert_flight(self, flight: FlightCreate) -> FlightRead: ...

    def get_flight_by_id(self, flight_id: int) -> Optional[FlightRead]: ...

    def update_flight(self, flight_id: int, flight: FlightCreate) -> None: ...

    def get_all_flights(self) -> List[FlightRead]: ...

    def get_all_flights_from_city_to_city(
        self, departure_city: str, arrival_city: str
    ) -> List[FlightRead]: ...


class FlightDAO:
    """SQLite implementation of :class:`FlightStore`."""

    def insert_flight(self, flight: FlightCreate) -> FlightRead:
        """Insert a transient flight and return the persisted row.

        The row is read back by ``lastrowid`` so that the result carries
        the generated ``flight_id`` and whatever SQLite actually stored.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO flight (departure_city, arrival_city, departure_time, carrier)
                VALUES (?, ?, ?, ?)
                """,
                (
                    flight.departure_city,
                    flight.arrival_city,
                    self._format_time(flight),
                    flight.carrier,
                ),
            )
            flight_id = cursor.lastrowid
            conn.commit()
            logger.info(
                "Inserted flight %s (%s -> %s)",
                flight_id,
                flight.departure_city,
                flight.arrival_city,
            )
            row = cursor.execute(
                "SELECT * FROM flight WHERE flight_id = ?", (flight_id,)
            ).fetchone()
            return self._row_to_flight_read(row)
        finally:
            conn.close()

    def get_flight_by_id(self, flight_id: int) -> Optional[FlightRead]:
        """Return the flight with ``flight_id`` or ``None`` if there is none."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM flight WHERE flight_id = ?", (flight_id,)
            ).fetchone()
            if not row:
                return None
            return self._row_to_flight_read(row)
        finally:
            conn.close()

    def update_flight(self, flight_id: int, flight: FlightCreate) -> None:
        """Overwrite every column except the identity of ``flight_id``."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE flight
                SET departure_city = ?, arrival_city = ?, departure_time = ?, carrier = ?
                WHERE flight_id = ?
                """,
                (
                    flight.departure_city,
                    flight.arrival_city,
                    self._format_time(flight),
                    flight.carrier,
                    flight_id,
                ),
            )
            conn.commit()
            logger.info("Updated flight %s (%s row(s))", flight_id, cursor.rowcount)
        finally:
            conn.close()

    def get_all_flights(self) -> List[FlightRead]:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT * FROM flight ORDER BY flight_id").fetchall()
            return [self._row_to_flight_read(row) for row in rows]
        finally:
            conn.close()

    def get_all_flights_from_city_to_city(
        self, departure_city: str, arrival_city: str
    ) -> List[FlightRead]:
        """Return flights matching both cities exactly, oldest first."""
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT * FROM flight
                WHERE departure_city = ? AND arrival_city = ?
                ORDER BY flight_id
                """,
                (departure_city, arrival_city),
            ).fetchall()
            return [self._row_to_flight_read(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _format_time(flight: FlightCreate) -> Optional[str]:
        if flight.departure_time is None:
            return None
        return flight.departure_time.isoformat()

    @staticmethod
    def _row_to_flight_read(row: sqlite3.Row) -> FlightRead:
        """Convert a database row to a FlightRead schema instance."""
        return FlightRead(
            flight_id=row["flight_id"],
            departure_city=row["departure_city"],
            arrival_city=row["arrival_city"],
            departure_time=row["departure_time"],
            carrier=row["carrier"],
        )
