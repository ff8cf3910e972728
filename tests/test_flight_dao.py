"""
DAO Tests

Tests for the SQLite flight data-access object.
"""

import sqlite3
from datetime import datetime

import pytest

from flight_records_api.app.core.config import settings
from flight_records_api.app.dao.flight_dao import FlightDAO
from flight_records_api.app.schemas.flight import FlightCreate, FlightRead
from flight_records_api.app.services.flight_service import FlightService


@pytest.fixture
def dao(db_path):
    return FlightDAO()


class TestFlightDAO:
    """Tests for FlightDAO against a temporary database."""

    def test_insert_assigns_identity(self, dao, flight_data):
        first = dao.insert_flight(FlightCreate(**flight_data))
        second = dao.insert_flight(FlightCreate(departure_city='LAX', arrival_city='NYC'))

        assert first.flight_id == 1
        assert second.flight_id == 2
        assert first.departure_time == datetime(2025, 9, 1, 10, 30)
        assert first.carrier == 'Delta'
        assert second.departure_time is None

    def test_get_flight_by_id(self, dao, flight_data):
        created = dao.insert_flight(FlightCreate(**flight_data))

        assert dao.get_flight_by_id(created.flight_id) == created
        assert dao.get_flight_by_id(999) is None

    def test_update_replaces_all_fields(self, dao, flight_data):
        created = dao.insert_flight(FlightCreate(**flight_data))

        dao.update_flight(created.flight_id, FlightCreate(departure_city='NYC', arrival_city='SFO'))

        assert dao.get_flight_by_id(created.flight_id) == FlightRead(
            flight_id=created.flight_id, departure_city='NYC', arrival_city='SFO'
        )

    def test_get_all_flights_ordered_by_id(self, dao):
        a = dao.insert_flight(FlightCreate(departure_city='A', arrival_city='B'))
        b = dao.insert_flight(FlightCreate(departure_city='C', arrival_city='D'))

        assert dao.get_all_flights() == [a, b]

    def test_route_filter_is_exact(self, dao):
        match = dao.insert_flight(FlightCreate(departure_city='Tampa', arrival_city='Dallas'))
        dao.insert_flight(FlightCreate(departure_city='tampa', arrival_city='Dallas'))
        dao.insert_flight(FlightCreate(departure_city='Dallas', arrival_city='Tampa'))

        assert dao.get_all_flights_from_city_to_city('Tampa', 'Dallas') == [match]
        assert dao.get_all_flights_from_city_to_city('Tampa', 'Reno') == []

    def test_missing_table_raises(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "database_url", str(tmp_path / "empty.db"))

        with pytest.raises(sqlite3.OperationalError):
            FlightDAO().get_all_flights()


def test_update_scenario_against_database(db_path):
    """Seed NYC->LAX, update to NYC->SFO, then read it back."""
    dao = FlightDAO()
    service = FlightService(dao)
    seeded = dao.insert_flight(FlightCreate(departure_city='NYC', arrival_city='LAX'))

    previous = service.update_flight(seeded.flight_id, FlightCreate(departure_city='NYC', arrival_city='SFO'))

    assert previous == seeded
    assert dao.get_flight_by_id(seeded.flight_id).arrival_city == 'SFO'
    assert service.update_flight(99, FlightCreate(departure_city='X', arrival_city='Y')) is None
    assert dao.get_flight_by_id(99) is None
