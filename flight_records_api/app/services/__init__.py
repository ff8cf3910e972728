"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
storage only through a DAO, so API handlers never touch SQL directly.
"""
