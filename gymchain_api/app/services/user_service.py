"""
Business logic for user accounts.

``UserService`` owns password hashing and the active flag.  The record
store, the authorization gate and the password hasher are passed in by
the caller (see ``api/v1/deps.py``); every operation checks the gate
before touching the store.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from gymchain_api.app.core.security import (
    ROLE_REGISTER_USER,
    ROLE_REMOVE_USER,
    ROLE_SEARCH_USER,
    SCOPE_READ,
    SCOPE_WRITE,
    Gate,
    hash_password,
)
from gymchain_api.app.models.user import User
from gymchain_api.app.repositories.base import Store
from gymchain_api.app.schemas.user import UserCreate, UserUpdate
from gymchain_api.app.services.exceptions import PermissionDeniedError, UserNotFoundError


logger = logging.getLogger(__name__)

# Fields an update may overwrite.  id, password and creation_date always
# come from the stored record.
USER_MERGE_FIELDS = ("name", "email", "phone", "birth_date", "active")


def merge_user(existing: User, data: UserUpdate) -> User:
    """Return ``existing`` with the fields sent in ``data`` applied.

    Only names in :data:`USER_MERGE_FIELDS` that the client actually
    sent are copied.  The password is not handled here.
    """
    changes = {
        field: getattr(data, field)
        for field in USER_MERGE_FIELDS
        if field in data.model_fields_set
    }
    return replace(existing, **changes)


class UserService:
    """Account operations: list, get, create, update, delete, set active."""

    def __init__(
        self,
        store: Store[User],
        gate: Gate,
        hasher: Callable[[str], str] = hash_password,
    ) -> None:
        self._store = store
        self._gate = gate
        self._hasher = hasher

    def _authorize(self, principal: Dict[str, Any], authority: str, scope: str) -> None:
        if not self._gate.authorize(principal, authority, scope):
            logger.warning(
                "Denied %s/%s to %s", authority, scope, principal.get("sub")
            )
            raise PermissionDeniedError(authority, scope)

    def _get_existing(self, user_id: int) -> User:
        user = self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self, principal: Dict[str, Any]) -> List[User]:
        self._authorize(principal, ROLE_SEARCH_USER, SCOPE_READ)
        return self._store.find_all()

    def get_user(self, principal: Dict[str, Any], user_id: int) -> User:
        """Return the user or raise :class:`UserNotFoundError`."""
        self._authorize(principal, ROLE_SEARCH_USER, SCOPE_READ)
        return self._get_existing(user_id)

    def create_user(self, principal: Dict[str, Any], data: UserCreate) -> User:
        """Hash the password, stamp the creation date and persist a new user."""
        self._authorize(principal, ROLE_REGISTER_USER, SCOPE_WRITE)
        user = User(
            name=data.name,
            email=data.email,
            password=self._hasher(data.password),
            phone=data.phone,
            birth_date=data.birth_date,
            active=data.active,
            creation_date=datetime.now(timezone.utc),
        )
        created = self._store.save(user)
        logger.info("Registered user %s (%s)", created.id, created.email)
        return created

    def update_user(self, principal: Dict[str, Any], user_id: int, data: UserUpdate) -> User:
        """Merge ``data`` into the stored user.

        Raises :class:`UserNotFoundError` without writing anything when
        the user does not exist.  ``id``, ``password`` and
        ``creation_date`` are preserved from the stored record unless a
        non‑empty password is supplied, in which case its hash replaces
        the stored one.
        """
        self._authorize(principal, ROLE_REGISTER_USER, SCOPE_WRITE)
        existing = self._get_existing(user_id)
        updated = merge_user(existing, data)
        if data.password:
            updated = replace(updated, password=self._hasher(data.password))
        saved = self._store.save(updated)
        logger.info("Updated user %s", user_id)
        return saved

    def delete_user(self, principal: Dict[str, Any], user_id: int) -> None:
        """Delete the user.  Unknown ids are ignored."""
        self._authorize(principal, ROLE_REMOVE_USER, SCOPE_WRITE)
        self._store.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)

    def set_active(self, principal: Dict[str, Any], user_id: int, active: bool) -> None:
        self._authorize(principal, ROLE_REGISTER_USER, SCOPE_WRITE)
        existing = self._get_existing(user_id)
        self._store.save(replace(existing, active=active))
        logger.info("Set user %s active=%s", user_id, active)
