"""
Workout endpoints for API v1.

Workouts can only be logged for existing, active users; the reward
points are computed by the server on every write.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from gymchain_api.app.api.v1.deps import get_workout_service
from gymchain_api.app.core.security import get_current_user
from gymchain_api.app.models.workout import Workout
from gymchain_api.app.schemas.workout import UserReference, WorkoutCreate, WorkoutRead, WorkoutUpdate
from gymchain_api.app.services.workout_service import WorkoutService


router = APIRouter()


def _to_read(workout: Workout) -> WorkoutRead:
    return WorkoutRead(
        id=workout.id,
        user=UserReference(id=workout.user_id),
        description=workout.description,
        workout_date=workout.workout_date,
        duration_minutes=workout.duration_minutes,
        total_hp_earned=workout.total_hp_earned,
    )


@router.get("", response_model=List[WorkoutRead])
def list_workouts(
    current_user: dict = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
) -> List[WorkoutRead]:
    return [_to_read(w) for w in service.list_workouts(current_user)]


@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(
    workout: WorkoutCreate,
    current_user: dict = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
) -> WorkoutRead:
    """Log a workout.

    Returns 400 when ``user`` is missing or refers to an unknown or
    inactive account.  ``total_hp_earned`` in the body is ignored.
    """
    return _to_read(service.create_workout(current_user, workout))


@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(
    workout_id: int,
    current_user: dict = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
) -> WorkoutRead:
    return _to_read(service.get_workout(current_user, workout_id))


@router.put("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: int,
    workout: WorkoutUpdate,
    current_user: dict = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
) -> WorkoutRead:
    """Update a workout; 404 if it does not exist, 400 for a bad user reference."""
    return _to_read(service.update_workout(current_user, workout_id, workout))


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(
    workout_id: int,
    current_user: dict = Depends(get_current_user),
    service: WorkoutService = Depends(get_workout_service),
) -> None:
    service.delete_workout(current_user, workout_id)
