"""
API package containing versioned routes.

Each version subpackage (currently only ``v1``) exposes a ``router``
that is mounted by :func:`flight_records_api.app.main.create_app`.
"""
