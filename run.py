"""Entry point for serving the Flight Records API.

Usage:
    python run.py

Host and port are read from the ``HOST`` and ``PORT`` environment
variables.  Defaults are ``0.0.0.0`` and ``8000``.
"""
import os

from uvicorn import Config, Server

from flight_records_api.app.core.config import settings


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(
        app="flight_records_api.app.main:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
