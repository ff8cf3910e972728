"""
Flight endpoints for API v1.

These routes expose create, update, retrieve and list operations for
flights, plus a route search by departure and arrival city.  The
service instance is supplied by the ``get_flight_service`` dependency
so that tests can override it.

Handlers are plain functions: the service talks to SQLite
synchronously, so FastAPI runs them in its threadpool.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from flight_records_api.app.schemas.flight import FlightCreate, FlightRead
from flight_records_api.app.services.flight_service import FlightService

router = APIRouter()


def get_flight_service() -> FlightService:
    """Return a service backed by the default SQLite DAO."""
    return FlightService()


@router.post("/", response_model=FlightRead, status_code=status.HTTP_201_CREATED)
def create_flight(
    flight_in: FlightCreate,
    service: FlightService = Depends(get_flight_service),
) -> FlightRead:
    """Create a flight and return it with its new ``flight_id``."""
    return service.add_flight(flight_in)


@router.get("/", response_model=List[FlightRead])
def list_flights(
    service: FlightService = Depends(get_flight_service),
) -> List[FlightRead]:
    """Return all flights."""
    return service.get_all_flights()


@router.get("/search", response_model=List[FlightRead])
def list_flights_by_route(
    departure_city: str = Query(..., min_length=1),
    arrival_city: str = Query(..., min_length=1),
    service: FlightService = Depends(get_flight_service),
) -> List[FlightRead]:
    """Return flights departing from ``departure_city`` and arriving at ``arrival_city``.

    Cities travel as query parameters so names containing ``/`` survive
    routing.
    """
    return service.get_all_flights_from_city_to_city(departure_city, arrival_city)


@router.get("/{flight_id}", response_model=FlightRead)
def get_flight(
    flight_id: int,
    service: FlightService = Depends(get_flight_service),
) -> FlightRead:
    """Retrieve a single flight by ID.

    Returns HTTP 404 if the flight is not found.
    """
    flight = service.get_flight_by_id(flight_id)
    if flight is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Flight not found")
    return flight


@router.put("/{flight_id}", response_model=FlightRead)
def update_flight(
    flight_id: int,
    flight_in: FlightCreate,
    service: FlightService = Depends(get_flight_service),
) -> FlightRead:
    """Replace an existing flight.

    The response body is the flight as it was before the update.
    Returns HTTP 404 if the flight does not exist.
    """
    previous = service.update_flight(flight_id, flight_in)
    if previous is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Flight not found")
    return previous
