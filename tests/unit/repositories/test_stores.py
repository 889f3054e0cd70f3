"""Unit tests for the SQLite user and workout stores."""

from dataclasses import replace
from datetime import date, datetime, timezone

import pytest

from gymchain_api.app.models import User, Workout
from gymchain_api.app.repositories import SQLiteUserStore, SQLiteWorkoutStore
from gymchain_api.app.services.exceptions import UserNotFoundError, WorkoutNotFoundError


def _user(email: str = "ana@gymchain.com", **overrides) -> User:
    fields = dict(
        name="Ana",
        email=email,
        password="salt$hash",
        creation_date=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        birth_date=date(1995, 6, 7),
    )
    fields.update(overrides)
    return User(**fields)


class TestSQLiteUserStore:
    """Tests for SQLiteUserStore."""

    def test_save_assigns_distinct_ids(self, database) -> None:
        store = SQLiteUserStore()
        first = store.save(_user("a@gymchain.com"))
        second = store.save(_user("b@gymchain.com"))
        assert first.id is not None
        assert second.id is not None
        assert first.id != second.id

    def test_find_by_id_round_trips_fields(self, database) -> None:
        store = SQLiteUserStore()
        saved = store.save(_user(active=False, phone="123"))
        loaded = store.find_by_id(saved.id)
        assert loaded == saved

    def test_find_by_id_missing(self, database) -> None:
        assert SQLiteUserStore().find_by_id(999) is None

    def test_find_by_email(self, database) -> None:
        store = SQLiteUserStore()
        saved = store.save(_user("find@gymchain.com"))
        assert store.find_by_email("find@gymchain.com") == saved
        assert store.find_by_email("nobody@gymchain.com") is None

    def test_save_existing_updates_in_place(self, database) -> None:
        store = SQLiteUserStore()
        saved = store.save(_user())
        store.save(replace(saved, name="Ana Paula", active=False))
        assert len(store.find_all()) == 1
        loaded = store.find_by_id(saved.id)
        assert loaded.name == "Ana Paula"
        assert loaded.active is False

    def test_duplicate_email_raises(self, database) -> None:
        import sqlite3

        store = SQLiteUserStore()
        store.save(_user("dup@gymchain.com"))
        with pytest.raises(sqlite3.IntegrityError):
            store.save(_user("dup@gymchain.com"))

    def test_delete_is_idempotent(self, database) -> None:
        store = SQLiteUserStore()
        saved = store.save(_user())
        store.delete_by_id(saved.id)
        store.delete_by_id(saved.id)
        assert store.find_by_id(saved.id) is None

    def test_find_all_ordered_by_id(self, database) -> None:
        store = SQLiteUserStore()
        ids = [store.save(_user(f"u{i}@gymchain.com")).id for i in range(3)]
        assert [u.id for u in store.find_all()] == ids


class TestSQLiteWorkoutStore:
    """Tests for SQLiteWorkoutStore."""

    def test_save_and_find(self, database) -> None:
        store = SQLiteWorkoutStore()
        saved = store.save(
            Workout(user_id=1, workout_date=date(2024, 3, 18), duration_minutes=25, total_hp_earned=20, description="Run")
        )
        assert saved.id is not None
        assert store.find_by_id(saved.id) == saved

    def test_update_keeps_single_row(self, database) -> None:
        store = SQLiteWorkoutStore()
        saved = store.save(Workout(user_id=1, workout_date=date(2024, 3, 18)))
        store.save(replace(saved, duration_minutes=60, total_hp_earned=60))
        assert store.find_all() == [replace(saved, duration_minutes=60, total_hp_earned=60)]

    def test_workouts_survive_user_deletion(self, database) -> None:
        """No cascade: removing the account leaves its workouts."""
        users = SQLiteUserStore()
        workouts = SQLiteWorkoutStore()
        user = users.save(_user())
        workout = workouts.save(Workout(user_id=user.id, workout_date=date(2024, 3, 18)))
        users.delete_by_id(user.id)
        assert workouts.find_by_id(workout.id) == workout

    def test_delete_missing_is_noop(self, database) -> None:
        SQLiteWorkoutStore().delete_by_id(12345)


class TestSaveAfterDelete:
    """Updating a record that was deleted never recreates it."""

    def test_user_save_of_deleted_record_raises(self, database) -> None:
        store = SQLiteUserStore()
        saved = store.save(_user())
        store.delete_by_id(saved.id)
        with pytest.raises(UserNotFoundError):
            store.save(replace(saved, active=False))
        assert store.find_by_id(saved.id) is None

    def test_workout_save_of_deleted_record_raises(self, database) -> None:
        store = SQLiteWorkoutStore()
        saved = store.save(Workout(user_id=1, workout_date=date(2024, 3, 18)))
        store.delete_by_id(saved.id)
        with pytest.raises(WorkoutNotFoundError):
            store.save(replace(saved, duration_minutes=30))
        assert store.find_all() == []
