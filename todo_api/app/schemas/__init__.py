"""
Pydantic schema definitions for API payloads.

Schemas are separated from the service layer to decouple the API
representation from the in-memory records.
"""
