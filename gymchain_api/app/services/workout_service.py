"""
Business logic for workouts.

Workouts reference a user account.  Creating or updating one requires
that account to exist and be active.  The reward points
(``total_hp_earned``) are always derived from the duration at write
time: 10 HP for every full 10 minutes.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from gymchain_api.app.core.security import (
    ROLE_REGISTER_WORKOUT,
    ROLE_REMOVE_WORKOUT,
    ROLE_SEARCH_WORKOUT,
    SCOPE_READ,
    SCOPE_WRITE,
    Gate,
)
from gymchain_api.app.models.user import User
from gymchain_api.app.models.workout import Workout
from gymchain_api.app.repositories.base import Store
from gymchain_api.app.schemas.workout import UserReference, WorkoutCreate, WorkoutUpdate
from gymchain_api.app.services.exceptions import (
    InvalidReferenceError,
    PermissionDeniedError,
    WorkoutNotFoundError,
)


logger = logging.getLogger(__name__)

HP_BLOCK_MINUTES = 10
HP_PER_BLOCK = 10

# Fields an update may overwrite besides the user reference.
WORKOUT_MERGE_FIELDS = ("description", "workout_date", "duration_minutes")


def calculate_hp(duration_minutes: Optional[int]) -> int:
    """Reward points for a workout: 10 per full 10 minutes, 0 without a duration."""
    if not duration_minutes:
        return 0
    return (duration_minutes // HP_BLOCK_MINUTES) * HP_PER_BLOCK


def merge_workout(existing: Workout, data: WorkoutUpdate, user_id: int) -> Workout:
    """Apply the sent fields of ``data`` to ``existing``.

    ``id`` and ``total_hp_earned`` are never taken from ``data``.
    """
    changes: Dict[str, Any] = {
        field: getattr(data, field)
        for field in WORKOUT_MERGE_FIELDS
        if field in data.model_fields_set
    }
    changes["user_id"] = user_id
    return replace(existing, **changes)


class WorkoutService:
    """Workout operations: list, get, create, update, delete."""

    def __init__(self, store: Store[Workout], users: Store[User], gate: Gate) -> None:
        self._store = store
        self._users = users
        self._gate = gate

    def _authorize(self, principal: Dict[str, Any], authority: str, scope: str) -> None:
        if not self._gate.authorize(principal, authority, scope):
            logger.warning(
                "Denied %s/%s to %s", authority, scope, principal.get("sub")
            )
            raise PermissionDeniedError(authority, scope)

    def _require_active_user(self, reference: Optional[UserReference]) -> User:
        """Return the referenced account or raise :class:`InvalidReferenceError`."""
        if reference is None or reference.id is None:
            raise InvalidReferenceError("Workout user is required.")
        user = self._users.find_by_id(reference.id)
        if user is None or not user.active:
            logger.info("Rejected workout for missing or inactive user %s", reference.id)
            raise InvalidReferenceError("Workout user does not exist or is inactive.")
        return user

    def list_workouts(self, principal: Dict[str, Any]) -> List[Workout]:
        self._authorize(principal, ROLE_SEARCH_WORKOUT, SCOPE_READ)
        return self._store.find_all()

    def get_workout(self, principal: Dict[str, Any], workout_id: int) -> Workout:
        self._authorize(principal, ROLE_SEARCH_WORKOUT, SCOPE_READ)
        workout = self._store.find_by_id(workout_id)
        if workout is None:
            raise WorkoutNotFoundError(workout_id)
        return workout

    def create_workout(self, principal: Dict[str, Any], data: WorkoutCreate) -> Workout:
        self._authorize(principal, ROLE_REGISTER_WORKOUT, SCOPE_WRITE)
        user = self._require_active_user(data.user)
        workout = Workout(
            user_id=user.id,
            description=data.description,
            workout_date=data.workout_date,
            duration_minutes=data.duration_minutes,
            total_hp_earned=calculate_hp(data.duration_minutes),
        )
        created = self._store.save(workout)
        logger.info(
            "Logged workout %s for user %s (%s HP)",
            created.id,
            user.id,
            created.total_hp_earned,
        )
        return created

    def update_workout(self, principal: Dict[str, Any], workout_id: int, data: WorkoutUpdate) -> Workout:
        """Update a workout and recompute its HP.

        Raises :class:`WorkoutNotFoundError` when the workout is absent
        and :class:`InvalidReferenceError` when the referenced user is
        missing or inactive.  Nothing is written in either case.
        """
        self._authorize(principal, ROLE_REGISTER_WORKOUT, SCOPE_WRITE)
        existing = self._store.find_by_id(workout_id)
        if existing is None:
            raise WorkoutNotFoundError(workout_id)
        user = self._require_active_user(data.user)
        updated = merge_workout(existing, data, user.id)
        updated = replace(updated, total_hp_earned=calculate_hp(updated.duration_minutes))
        saved = self._store.save(updated)
        logger.info("Updated workout %s (%s HP)", workout_id, saved.total_hp_earned)
        return saved

    def delete_workout(self, principal: Dict[str, Any], workout_id: int) -> None:
        self._authorize(principal, ROLE_REMOVE_WORKOUT, SCOPE_WRITE)
        self._store.delete_by_id(workout_id)
        logger.info("Deleted workout %s", workout_id)
