"""Tests for profile service."""

from datetime import date
from uuid import uuid4

import pytest

from calorie_tracker.domain.profiles import ActivityLevel, Biometrics, GoalDirection
from calorie_tracker.services.profiles import ProfileNotFoundError, ProfileService
from tests.conftest import InMemoryProfileRepository

ON = date(2024, 1, 10)


def test_create_profile_stores_goals(
    profile_repository: InMemoryProfileRepository, biometrics: Biometrics
) -> None:
    service = ProfileService(profile_repository)
    user_id = uuid4()

    profile = service.create_profile(user_id, biometrics, on=ON)

    assert profile.goals.calories == 2081
    assert profile_repository.get_profile(user_id) == profile


def test_update_biometrics_recomputes_goals(
    profile_repository: InMemoryProfileRepository, biometrics: Biometrics
) -> None:
    service = ProfileService(profile_repository)
    user_id = uuid4()
    created = service.create_profile(user_id, biometrics, on=ON)

    updated = service.update_biometrics(
        user_id, on=ON, weight_kg=80, activity_level=ActivityLevel.ACTIVE
    )

    assert updated.biometrics.weight_kg == 80
    assert updated.goals.protein_g == 160
    assert updated.goals.calories > created.goals.calories
    assert profile_repository.saves == 2


def test_unchanged_biometrics_skip_save(
    profile_repository: InMemoryProfileRepository, biometrics: Biometrics
) -> None:
    service = ProfileService(profile_repository)
    user_id = uuid4()
    created = service.create_profile(user_id, biometrics, on=ON)

    same = service.update_biometrics(user_id, on=ON, goal=GoalDirection.LOSE)

    assert same == created
    assert profile_repository.saves == 1


def test_update_unknown_profile_raises(
    profile_repository: InMemoryProfileRepository,
) -> None:
    with pytest.raises(ProfileNotFoundError):
        ProfileService(profile_repository).update_biometrics(uuid4(), weight_kg=60)
