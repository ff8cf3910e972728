"""
Pydantic models for flight records.

``FlightCreate`` is a *transient* flight: it has not been stored yet
and therefore carries no ``flight_id``.  It doubles as the replacement
body for updates, since an update never changes the identity.
``FlightRead`` is a *persisted* flight as returned by the data-access
layer, always carrying the ``flight_id`` assigned on insert.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FlightBase(BaseModel):
    departure_city: str = Field(..., min_length=1, examples=["New York"])
    arrival_city: str = Field(..., min_length=1, examples=["Los Angeles"])
    departure_time: Optional[datetime] = Field(None, examples=["2025-09-01T10:00:00"])
    carrier: Optional[str] = Field(None, examples=["Delta"])


class FlightCreate(FlightBase):
    """Schema for creating or replacing a flight."""
    pass


class FlightRead(FlightBase):
    """Schema for reading a stored flight."""

    flight_id: int
