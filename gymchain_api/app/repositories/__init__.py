"""
Record stores.

A store offers four operations (``find_all``, ``find_by_id``, ``save``
and ``delete_by_id``) over one kind of record.  Services receive stores
through their constructors, so the SQLite implementations here can be
swapped for any object with the same methods.
"""

from .base import Store  # noqa: F401
from .user_repository import SQLiteUserStore  # noqa: F401
from .workout_repository import SQLiteWorkoutStore  # noqa: F401
