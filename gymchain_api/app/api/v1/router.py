"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under their resource prefixes.
"""

from fastapi import APIRouter

from .endpoints import users, workouts

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
