"""
Top‑level package for the Flight Records API.

This file makes ``flight_records_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``flight_records_api.app.main``.  The HTTP client for the API
lives in :mod:`flight_records_api.client`.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
