"""Flight Records API client.

A thin wrapper around the REST API served by
``flight_records_api.app.main``.  The client uses the ``requests``
library and exposes one method per flight operation:

* :meth:`add_flight` – create a flight and get back its ``flight_id``.
* :meth:`update_flight` – replace a flight; returns its previous state.
* :meth:`get_flight` – fetch a single flight.
* :meth:`list_flights` – fetch all flights.
* :meth:`list_flights_by_route` – fetch flights between two cities.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for the
list methods) and ``error`` is a dictionary with keys ``status_code``
and ``message``.  Failures are logged, never raised.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class FlightRecordsAPI:
    """Client for the flight endpoints of the Flight Records API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        prefix: str = "/api/v1/flights",
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            prefix: Path under which the flight router is mounted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against the flight router.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``).
            path: Path relative to the flight prefix, e.g. ``/`` or ``/3``.
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                message = self._error_message(exc.response)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Flatten an error body into a single line of text.

        FastAPI sends ``{"detail": "..."}`` for HTTP errors and
        ``{"detail": [{"loc": [...], "msg": "..."}, ...]}`` for
        validation errors; anything else is returned as raw text.
        """
        try:
            err_json = response.json()
        except ValueError:
            return response.text
        if not isinstance(err_json, dict):
            return json.dumps(err_json)
        detail = err_json.get("detail")
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list):
            parts = []
            for item in detail:
                if isinstance(item, dict) and "msg" in item:
                    loc = ".".join(str(p) for p in item.get("loc", []))
                    parts.append(f"{loc}: {item['msg']}" if loc else str(item["msg"]))
                else:
                    parts.append(str(item))
            return "; ".join(parts)
        return json.dumps(err_json)

    @staticmethod
    def _as_list(data: Any) -> List[Dict[str, Any]]:
        return data if isinstance(data, list) else []

    # ------------------------------------------------------------------
    # Flight operations
    # ------------------------------------------------------------------
    def add_flight(self, flight: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a flight.

        Args:
            flight: Flight fields without ``flight_id``.
        Returns:
            A tuple ``(flight, error)`` where ``flight`` includes the
            generated ``flight_id``.
        """
        return self._request("POST", "/", json_body=flight)

    def update_flight(
        self, flight_id: int, flight: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace flight ``flight_id``.

        The returned flight holds the values from *before* the update.
        A missing flight yields an error with ``status_code`` 404.
        """
        return self._request("PUT", f"/{flight_id}", json_body=flight)

    def get_flight(self, flight_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/{flight_id}")

    def list_flights(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/")
        if error:
            return [], error
        return self._as_list(data), None

    def list_flights_by_route(
        self, departure_city: str, arrival_city: str
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve flights from ``departure_city`` to ``arrival_city``.

        City names are sent as query parameters, so any text is allowed.
        """
        data, error = self._request(
            "GET",
            "/search",
            params={"departure_city": departure_city, "arrival_city": arrival_city},
        )
        if error:
            return [], error
        return self._as_list(data), None
