"""
Application package initializer.

The application is split into layers: ``api`` holds the FastAPI
routers, ``services`` the business logic, ``dao`` the data-access
objects that talk to SQLite and ``schemas`` the pydantic models that
travel between them.  Versioning is handled by grouping routers under
the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
