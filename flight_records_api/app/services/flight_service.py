"""
Business logic for flights.

``FlightService`` sits between the HTTP layer and the data-access
layer.  Most methods are a single call into the DAO; the only decision
made here is refusing to update a flight that does not exist.
"""

import logging
from typing import List, Optional

from flight_records_api.app.dao.flight_dao import FlightDAO, FlightStore
from flight_records_api.app.schemas.flight import FlightCreate, FlightRead


logger = logging.getLogger(__name__)


class FlightService:
    """Service for managing flights.

    A DAO may be passed in (tests use an in-memory store); otherwise a
    :class:`FlightDAO` backed by the configured SQLite database is used.
    The service keeps no other state.
    """

    def __init__(self, flight_dao: Optional[FlightStore] = None) -> None:
        self.flight_dao = flight_dao if flight_dao is not None else FlightDAO()

    def add_flight(self, flight: FlightCreate) -> FlightRead:
        """Persist a new flight.

        Returns the record produced by the DAO, not ``flight`` itself,
        so the caller gets the generated ``flight_id``.
        """
        persisted = self.flight_dao.insert_flight(flight)
        logger.debug("Added flight %s", persisted.flight_id)
        return persisted

    def update_flight(self, flight_id: int, flight: FlightCreate) -> Optional[FlightRead]:
        """Replace the flight ``flight_id`` with ``flight``.

        Returns ``None`` without writing anything when the flight does
        not exist.  On success the flight as it was *before* the update
        is returned, not the new values.
        """
        existing = self.flight_dao.get_flight_by_id(flight_id)
        if existing is None:
            logger.debug("Flight %s not found, nothing updated", flight_id)
            return None
        self.flight_dao.update_flight(flight_id, flight)
        return existing

    def get_flight_by_id(self, flight_id: int) -> Optional[FlightRead]:
        return self.flight_dao.get_flight_by_id(flight_id)

    def get_all_flights(self) -> List[FlightRead]:
        return self.flight_dao.get_all_flights()

    def get_all_flights_from_city_to_city(
        self, departure_city: str, arrival_city: str
    ) -> List[FlightRead]:
        """Return flights from ``departure_city`` to ``arrival_city``.

        City names are passed to the DAO as given.
        """
        return self.flight_dao.get_all_flights_from_city_to_city(departure_city, arrival_city)
