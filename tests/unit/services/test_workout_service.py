"""Unit tests for WorkoutService and the HP calculation."""

from dataclasses import replace
from datetime import date, datetime, timezone

import pytest

from gymchain_api.app.core.security import ROLE_SEARCH_WORKOUT, AuthorityScopeGate
from gymchain_api.app.models import User
from gymchain_api.app.repositories import SQLiteUserStore, SQLiteWorkoutStore
from gymchain_api.app.schemas.workout import WorkoutCreate, WorkoutUpdate
from gymchain_api.app.services.exceptions import (
    InvalidReferenceError,
    PermissionDeniedError,
    WorkoutNotFoundError,
)
from gymchain_api.app.services.workout_service import WorkoutService, calculate_hp


@pytest.fixture
def users(database) -> SQLiteUserStore:
    return SQLiteUserStore()


@pytest.fixture
def store(database) -> SQLiteWorkoutStore:
    return SQLiteWorkoutStore()


@pytest.fixture
def service(store, users) -> WorkoutService:
    return WorkoutService(store, users, AuthorityScopeGate())


def _member(users: SQLiteUserStore, email: str, active: bool = True) -> User:
    return users.save(
        User(
            name="Member",
            email=email,
            password="salt$hash",
            active=active,
            creation_date=datetime.now(timezone.utc),
        )
    )


@pytest.fixture
def member(users) -> User:
    return _member(users, "member@gymchain.com")


@pytest.fixture
def inactive_member(users) -> User:
    return _member(users, "inactive@gymchain.com", active=False)


def _create_data(user_id, minutes: int = 25, **extra) -> WorkoutCreate:
    user = {"id": user_id} if user_id is not None else None
    return WorkoutCreate(user=user, workout_date=date(2024, 3, 18), duration_minutes=minutes, **extra)


class TestCalculateHp:
    """Tests for calculate_hp."""

    @pytest.mark.parametrize(
        "minutes, expected",
        [(0, 0), (9, 0), (10, 10), (19, 10), (25, 20), (60, 60), (None, 0)],
    )
    def test_full_ten_minute_blocks(self, minutes, expected) -> None:
        assert calculate_hp(minutes) == expected


class TestCreateWorkout:
    """Tests for WorkoutService.create_workout."""

    def test_computes_hp_and_assigns_id(self, service, admin, member) -> None:
        created = service.create_workout(admin, _create_data(member.id, 25))
        assert created.id is not None
        assert created.user_id == member.id
        assert created.total_hp_earned == 20

    def test_client_hp_is_ignored(self, service, admin, member) -> None:
        created = service.create_workout(admin, _create_data(member.id, 9, total_hp_earned=500))
        assert created.total_hp_earned == 0

    def test_missing_user_reference(self, service, store, admin) -> None:
        with pytest.raises(InvalidReferenceError) as exc_info:
            service.create_workout(admin, _create_data(None))
        assert "required" in exc_info.value.message
        assert store.find_all() == []

    def test_reference_without_id(self, service, store, admin) -> None:
        data = WorkoutCreate(user={}, workout_date=date(2024, 3, 18), duration_minutes=30)
        with pytest.raises(InvalidReferenceError):
            service.create_workout(admin, data)
        assert store.find_all() == []

    def test_unknown_user(self, service, store, admin) -> None:
        with pytest.raises(InvalidReferenceError) as exc_info:
            service.create_workout(admin, _create_data(777))
        assert "inactive" in exc_info.value.message
        assert store.find_all() == []

    def test_inactive_user(self, service, store, admin, inactive_member) -> None:
        with pytest.raises(InvalidReferenceError):
            service.create_workout(admin, _create_data(inactive_member.id))
        assert store.find_all() == []

    def test_gate_checked_before_validation(self, service) -> None:
        """A caller without write scope gets 403 even for invalid input."""
        reader = {"authorities": [ROLE_SEARCH_WORKOUT], "scope": ["read"]}
        with pytest.raises(PermissionDeniedError):
            service.create_workout(reader, _create_data(None))


class TestUpdateWorkout:
    """Tests for WorkoutService.update_workout."""

    @pytest.fixture
    def workout(self, service, admin, member):
        return service.create_workout(admin, _create_data(member.id, 25, description="Run"))

    def test_recomputes_hp(self, service, admin, member, workout) -> None:
        data = WorkoutUpdate(user={"id": member.id}, workout_date=date(2024, 3, 19), duration_minutes=47)
        updated = service.update_workout(admin, workout.id, data)
        assert updated.id == workout.id
        assert updated.duration_minutes == 47
        assert updated.total_hp_earned == 40
        assert updated.workout_date == date(2024, 3, 19)

    def test_ignores_client_id_and_hp(self, service, store, admin, member, workout) -> None:
        data = WorkoutUpdate(
            id=9999,
            user={"id": member.id},
            workout_date=workout.workout_date,
            duration_minutes=10,
            total_hp_earned=1000,
        )
        updated = service.update_workout(admin, workout.id, data)
        assert updated.id == workout.id
        assert updated.total_hp_earned == 10
        assert store.find_by_id(9999) is None

    def test_unsent_description_kept(self, service, admin, member, workout) -> None:
        data = WorkoutUpdate(user={"id": member.id}, workout_date=workout.workout_date, duration_minutes=30)
        assert service.update_workout(admin, workout.id, data).description == "Run"

    def test_moves_workout_to_other_active_user(self, service, users, admin, workout) -> None:
        other = _member(users, "other@gymchain.com")
        data = WorkoutUpdate(user={"id": other.id}, workout_date=workout.workout_date, duration_minutes=30)
        assert service.update_workout(admin, workout.id, data).user_id == other.id

    def test_missing_workout_raises_not_found(self, service, store, admin, member, workout) -> None:
        before = store.find_all()
        data = WorkoutUpdate(user={"id": member.id}, workout_date=date(2024, 3, 18), duration_minutes=30)
        with pytest.raises(WorkoutNotFoundError):
            service.update_workout(admin, workout.id + 50, data)
        assert store.find_all() == before

    def test_not_found_checked_before_reference(self, service, admin) -> None:
        data = WorkoutUpdate(workout_date=date(2024, 3, 18), duration_minutes=30)
        with pytest.raises(WorkoutNotFoundError):
            service.update_workout(admin, 31337, data)

    def test_inactive_user_rejected_without_write(self, service, store, users, admin, member, workout) -> None:
        users.save(replace(member, active=False))
        data = WorkoutUpdate(user={"id": member.id}, workout_date=workout.workout_date, duration_minutes=90)
        with pytest.raises(InvalidReferenceError):
            service.update_workout(admin, workout.id, data)
        assert store.find_by_id(workout.id) == workout


class TestGetListDelete:
    """Tests for get, list and delete."""

    def test_get_missing(self, service, admin) -> None:
        with pytest.raises(WorkoutNotFoundError):
            service.get_workout(admin, 1)

    def test_list_and_get(self, service, admin, member) -> None:
        created = service.create_workout(admin, _create_data(member.id))
        assert service.list_workouts(admin) == [created]
        assert service.get_workout(admin, created.id) == created

    def test_delete_is_idempotent(self, service, store, admin, member) -> None:
        created = service.create_workout(admin, _create_data(member.id))
        service.delete_workout(admin, created.id)
        service.delete_workout(admin, created.id)
        assert store.find_all() == []
