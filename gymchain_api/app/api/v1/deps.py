"""
Dependency providers for the v1 endpoints.

Services are assembled here from their collaborators.  Tests and
alternative deployments replace any of these through
``app.dependency_overrides``.
"""

from fastapi import Depends

from gymchain_api.app.core.security import AuthorityScopeGate, Gate
from gymchain_api.app.repositories.user_repository import SQLiteUserStore
from gymchain_api.app.repositories.workout_repository import SQLiteWorkoutStore
from gymchain_api.app.services.user_service import UserService
from gymchain_api.app.services.workout_service import WorkoutService


def get_gate() -> Gate:
    return AuthorityScopeGate()


def get_user_store() -> SQLiteUserStore:
    return SQLiteUserStore()


def get_workout_store() -> SQLiteWorkoutStore:
    return SQLiteWorkoutStore()


def get_user_service(
    store: SQLiteUserStore = Depends(get_user_store),
    gate: Gate = Depends(get_gate),
) -> UserService:
    return UserService(store, gate)


def get_workout_service(
    store: SQLiteWorkoutStore = Depends(get_workout_store),
    users: SQLiteUserStore = Depends(get_user_store),
    gate: Gate = Depends(get_gate),
) -> WorkoutService:
    return WorkoutService(store, users, gate)
