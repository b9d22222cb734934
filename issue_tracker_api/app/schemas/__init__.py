"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store records so that the wire
format can change independently of storage.
"""
