"""
Application package initializer.

The API is split into small layers: ``schemas`` describe request and
response bodies, ``models`` are the persisted records, ``repositories``
implement the record stores, ``services`` hold the business rules and
``api/v1/endpoints`` exposes one router per domain (users, workouts).
"""

from .main import app  # noqa: F401
