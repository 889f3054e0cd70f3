from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Workout:
    """A logged training session as stored in the ``workouts`` table."""

    user_id: int
    workout_date: date
    duration_minutes: int = 0
    total_hp_earned: int = 0
    description: Optional[str] = None
    id: Optional[int] = None
