"""
SQLite store for user accounts.

Dates are stored as ISO strings and booleans as 0/1 integers, matching
the schema created by ``core.db.init_db``.
"""

import sqlite3
from dataclasses import replace
from datetime import date, datetime
from typing import List, Optional

from gymchain_api.app.core.db import get_cursor
from gymchain_api.app.models.user import User
from gymchain_api.app.services.exceptions import UserNotFoundError


_COLUMNS = "id, name, email, password, phone, birth_date, active, creation_date"


def _row_to_user(row: sqlite3.Row) -> User:
    return User(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        password=row["password"],
        phone=row["phone"],
        birth_date=date.fromisoformat(row["birth_date"]) if row["birth_date"] else None,
        active=bool(row["active"]),
        creation_date=datetime.fromisoformat(row["creation_date"]),
    )


def _user_values(user: User) -> tuple:
    return (
        user.name,
        user.email,
        user.password,
        user.phone,
        user.birth_date.isoformat() if user.birth_date else None,
        1 if user.active else 0,
        user.creation_date.isoformat(),
    )


class SQLiteUserStore:
    """Store for :class:`User` records backed by the ``users`` table."""

    def find_all(self) -> List[User]:
        with get_cursor() as cursor:
            rows = cursor.execute(f"SELECT {_COLUMNS} FROM users ORDER BY id").fetchall()
        return [_row_to_user(row) for row in rows]

    def find_by_id(self, user_id: int) -> Optional[User]:
        with get_cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        return _row_to_user(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        with get_cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM users WHERE email = ?", (email,)
            ).fetchone()
        return _row_to_user(row) if row else None

    def save(self, user: User) -> User:
        """Insert or update ``user`` and return the stored record.

        Raises :class:`UserNotFoundError` when ``user.id`` is no longer in
        the table; a deleted account is never recreated.
        """
        with get_cursor() as cursor:
            if user.id is not None:
                cursor.execute(
                    "UPDATE users SET name = ?, email = ?, password = ?, phone = ?, "
                    "birth_date = ?, active = ?, creation_date = ? WHERE id = ?",
                    (*_user_values(user), user.id),
                )
                if not cursor.rowcount:
                    raise UserNotFoundError(user.id)
                return user
            cursor.execute(
                "INSERT INTO users (name, email, password, phone, birth_date, active, creation_date) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                _user_values(user),
            )
            return replace(user, id=cursor.lastrowid)

    def delete_by_id(self, user_id: int) -> None:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
