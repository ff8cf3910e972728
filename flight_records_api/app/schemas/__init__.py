"""
Pydantic schema definitions for API payloads.

Schemas are separated from the data-access layer to decouple the API
representation from how rows are stored.
"""
