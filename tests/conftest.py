"""
Pytest Configuration and Fixtures

Shared fixtures for the flight records tests.
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from flight_records_api.app.core.config import settings
from flight_records_api.app.core.db import init_db
from flight_records_api.app.main import app
from flight_records_api.app.schemas.flight import FlightCreate, FlightRead
from flight_records_api.app.services.flight_service import FlightService


class RecordingFlightStore:
    """In-memory flight store that records every write it receives."""

    def __init__(self) -> None:
        self.flights: Dict[int, FlightRead] = {}
        self.inserts: List[FlightCreate] = []
        self.updates: List[Tuple[int, FlightCreate]] = []
        self.route_queries: List[Tuple[str, str]] = []
        self._next_id = 1

    def seed(self, flight: FlightRead) -> FlightRead:
        self.flights[flight.flight_id] = flight
        self._next_id = max(self._next_id, flight.flight_id + 1)
        return flight

    def insert_flight(self, flight: FlightCreate) -> FlightRead:
        self.inserts.append(flight)
        persisted = FlightRead(flight_id=self._next_id, **flight.model_dump())
        self.flights[persisted.flight_id] = persisted
        self._next_id += 1
        return persisted

    def get_flight_by_id(self, flight_id: int) -> Optional[FlightRead]:
        return self.flights.get(flight_id)

    def update_flight(self, flight_id: int, flight: FlightCreate) -> None:
        self.updates.append((flight_id, flight))
        self.flights[flight_id] = FlightRead(flight_id=flight_id, **flight.model_dump())

    def get_all_flights(self) -> List[FlightRead]:
        return list(self.flights.values())

    def get_all_flights_from_city_to_city(
        self, departure_city: str, arrival_city: str
    ) -> List[FlightRead]:
        self.route_queries.append((departure_city, arrival_city))
        return [
            f for f in self.flights.values()
            if f.departure_city == departure_city and f.arrival_city == arrival_city
        ]


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Empty recording store."""
    return RecordingFlightStore()


@pytest.fixture
def flight_service(store):
    """FlightService wired to the recording store."""
    return FlightService(store)


@pytest.fixture
def flight_data():
    """Generate basic transient flight data."""
    return {
        'departure_city': 'NYC',
        'arrival_city': 'LAX',
        'departure_time': datetime(2025, 9, 1, 10, 30),
        'carrier': 'Delta',
    }


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the application at a fresh, migrated SQLite file."""
    path = tmp_path / "flights.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    """Test client for the application backed by ``db_path``."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
