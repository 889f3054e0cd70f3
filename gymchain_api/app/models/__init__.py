"""
Persisted records.

Records are plain dataclasses handed to and returned by the stores in
``repositories``.  They carry every stored column, including the
password hash, and are never serialised directly by the API.
"""

from .user import User  # noqa: F401
from .workout import Workout  # noqa: F401
