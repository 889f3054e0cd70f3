"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persisted records in ``models`` so the
API representation (no password hash, nested user reference) can
differ from what the stores keep.
"""
