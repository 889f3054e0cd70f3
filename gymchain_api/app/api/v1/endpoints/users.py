"""
User endpoints for API v1.

CRUD over gym member accounts plus ``PUT /users/{id}/active`` to toggle
the active flag.  Authentication happens in ``get_current_user``;
authority and scope checks, not‑found and validation errors are raised
by ``UserService`` and translated by the handlers registered in
``main.create_app``.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, status

from gymchain_api.app.api.v1.deps import get_user_service
from gymchain_api.app.core.security import get_current_user
from gymchain_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from gymchain_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[UserRead])
def list_users(
    current_user: dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> List[UserRead]:
    """List every user.  No filtering or pagination."""
    return [UserRead.model_validate(user) for user in service.list_users(current_user)]


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserCreate,
    current_user: dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new user.  The password is stored hashed and never returned."""
    return UserRead.model_validate(service.create_user(current_user, user))


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    current_user: dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    return UserRead.model_validate(service.get_user(current_user, user_id))


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user: UserUpdate,
    current_user: dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Update a user.

    ``id``, ``creation_date`` and the stored password are kept.  Send a
    non‑empty ``password`` to change it.
    """
    return UserRead.model_validate(service.update_user(current_user, user_id, user))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    current_user: dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user.  Deleting an unknown id also returns 204."""
    service.delete_user(current_user, user_id)


@router.put("/{user_id}/active", status_code=status.HTTP_204_NO_CONTENT)
def update_active(
    user_id: int,
    active: bool = Body(..., examples=[False]),
    current_user: dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> None:
    """Set the ``active`` flag.  The body is a bare JSON boolean."""
    service.set_active(current_user, user_id, active)
