"""
Data-access layer.

Each DAO owns the SQL for one table and converts rows to schema
instances.  Services depend on the ``Protocol`` a DAO satisfies rather
than on the concrete class, so tests can hand them an in-memory store.
"""
