"""SQLite store for workout records."""

import sqlite3
from dataclasses import replace
from datetime import date
from typing import List, Optional

from gymchain_api.app.core.db import get_cursor
from gymchain_api.app.models.workout import Workout
from gymchain_api.app.services.exceptions import WorkoutNotFoundError


_COLUMNS = "id, user_id, description, workout_date, duration_minutes, total_hp_earned"


def _row_to_workout(row: sqlite3.Row) -> Workout:
    return Workout(
        id=row["id"],
        user_id=row["user_id"],
        description=row["description"],
        workout_date=date.fromisoformat(row["workout_date"]),
        duration_minutes=row["duration_minutes"],
        total_hp_earned=row["total_hp_earned"],
    )


def _workout_values(workout: Workout) -> tuple:
    return (
        workout.user_id,
        workout.description,
        workout.workout_date.isoformat(),
        workout.duration_minutes,
        workout.total_hp_earned,
    )


class SQLiteWorkoutStore:
    """Store for :class:`Workout` records backed by the ``workouts`` table."""

    def find_all(self) -> List[Workout]:
        with get_cursor() as cursor:
            rows = cursor.execute(f"SELECT {_COLUMNS} FROM workouts ORDER BY id").fetchall()
        return [_row_to_workout(row) for row in rows]

    def find_by_id(self, workout_id: int) -> Optional[Workout]:
        with get_cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM workouts WHERE id = ?", (workout_id,)
            ).fetchone()
        return _row_to_workout(row) if row else None

    def save(self, workout: Workout) -> Workout:
        with get_cursor() as cursor:
            if workout.id is not None:
                cursor.execute(
                    "UPDATE workouts SET user_id = ?, description = ?, workout_date = ?, "
                    "duration_minutes = ?, total_hp_earned = ? WHERE id = ?",
                    (*_workout_values(workout), workout.id),
                )
                if not cursor.rowcount:
                    raise WorkoutNotFoundError(workout.id)
                return workout
            cursor.execute(
                "INSERT INTO workouts (user_id, description, workout_date, duration_minutes, total_hp_earned) "
                "VALUES (?, ?, ?, ?, ?)",
                _workout_values(workout),
            )
            return replace(workout, id=cursor.lastrowid)

    def delete_by_id(self, workout_id: int) -> None:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM workouts WHERE id = ?", (workout_id,))
