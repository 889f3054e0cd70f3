"""
Pydantic models for workouts.

The owning account is referenced as a nested object ``{"id": 1}``.
The reference is optional at the schema level so a missing user yields
the service's 400 message rather than a generic validation error.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class UserReference(BaseModel):
    id: Optional[int] = None


class WorkoutBase(BaseModel):
    user: Optional[UserReference] = None
    description: Optional[str] = Field(None, max_length=500, examples=["Leg day"])
    workout_date: date = Field(..., examples=["2024-03-18"])
    duration_minutes: int = Field(..., ge=0, examples=[45])
    # Always recomputed from duration_minutes; any value sent is ignored.
    total_hp_earned: Optional[int] = None


class WorkoutCreate(WorkoutBase):
    pass


class WorkoutUpdate(WorkoutBase):
    id: Optional[int] = None


class WorkoutRead(BaseModel):
    id: int
    user: UserReference
    description: Optional[str] = None
    workout_date: date
    duration_minutes: int
    total_hp_earned: int
