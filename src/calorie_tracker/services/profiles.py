"""User profile service keeping goals in sync with biometrics."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.profiles import Biometrics, UserProfile
from calorie_tracker.services.goals import GoalCalculator

_logger = logging.getLogger(__name__)


class ProfileNotFoundError(LookupError):
    """No profile is stored for the user."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"No profile for user {user_id}")
        self.user_id = user_id


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile, if present."""

    def save_profile(self, profile: UserProfile) -> None:
        """Insert or replace a profile with its goal snapshot."""


@dataclass
class ProfileService:
    """Application service for profile creation and biometric updates."""

    repository: ProfileRepository
    calculator: GoalCalculator = field(default_factory=GoalCalculator)

    def create_profile(
        self, user_id: UUID, biometrics: Biometrics, *, on: date | None = None
    ) -> UserProfile:
        """Compute goals for new biometrics and persist the profile."""
        profile = UserProfile(
            id=user_id,
            biometrics=biometrics,
            goals=self.calculator.compute_goals(biometrics, on=on),
        )
        self.repository.save_profile(profile)
        return profile

    def update_biometrics(
        self, user_id: UUID, *, on: date | None = None, **changes: object
    ) -> UserProfile:
        """Apply biometric changes; goals are recomputed when any input changed."""
        current = self.repository.get_profile(user_id)
        if current is None:
            raise ProfileNotFoundError(user_id)
        biometrics = replace(current.biometrics, **changes)
        if biometrics == current.biometrics:
            return current
        updated = UserProfile(
            id=user_id,
            biometrics=biometrics,
            goals=self.calculator.compute_goals(biometrics, on=on),
        )
        self.repository.save_profile(updated)
        _logger.info(
            "Recomputed goals: user_id=%s calories=%s",
            user_id,
            updated.goals.calories,
        )
        return updated
