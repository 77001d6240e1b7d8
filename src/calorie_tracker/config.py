"""Application configuration."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_tracker.domain.profiles import ActivityLevel

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}


class NutritionPolicy(BaseModel):
    """Fixed coefficients used to derive goals from biometrics."""

    model_config = ConfigDict(frozen=True)

    protein_g_per_kg: float = Field(default=2.0, ge=0.0)
    fat_energy_fraction: float = Field(default=0.25, gt=0.0, lt=1.0)
    energy_deficit_kcal: float = Field(default=500.0, ge=0.0)
    energy_surplus_kcal: float = Field(default=500.0, ge=0.0)
    protein_kcal_per_g: float = Field(default=4.0, gt=0.0)
    carbs_kcal_per_g: float = Field(default=4.0, gt=0.0)
    fat_kcal_per_g: float = Field(default=9.0, gt=0.0)
    activity_multipliers: dict[ActivityLevel, float] = Field(
        default_factory=lambda: dict(DEFAULT_ACTIVITY_MULTIPLIERS)
    )

    @field_validator("activity_multipliers")
    @classmethod
    def _check_multipliers(
        cls, value: dict[ActivityLevel, float]
    ) -> dict[ActivityLevel, float]:
        missing = [level.value for level in ActivityLevel if level not in value]
        if missing:
            raise ValueError(f"missing activity multipliers: {', '.join(missing)}")
        for level, factor in value.items():
            if factor <= 1.0:
                raise ValueError(f"activity multiplier for {level} must exceed 1.0")
        return value


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    log_level: str = "INFO"
    default_timezone: str = "UTC"
    protein_g_per_kg: float = 2.0
    fat_energy_fraction: float = 0.25
    energy_deficit_kcal: float = 500.0
    energy_surplus_kcal: float = 500.0
    protein_kcal_per_g: float = 4.0
    carbs_kcal_per_g: float = 4.0
    fat_kcal_per_g: float = 9.0
    activity_multipliers: dict[ActivityLevel, float] = Field(
        default_factory=lambda: dict(DEFAULT_ACTIVITY_MULTIPLIERS)
    )
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="CALORIE_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def nutrition_policy(self) -> NutritionPolicy:
        """Build the goal policy from the configured coefficients."""
        return NutritionPolicy(
            protein_g_per_kg=self.protein_g_per_kg,
            fat_energy_fraction=self.fat_energy_fraction,
            energy_deficit_kcal=self.energy_deficit_kcal,
            energy_surplus_kcal=self.energy_surplus_kcal,
            protein_kcal_per_g=self.protein_kcal_per_g,
            carbs_kcal_per_g=self.carbs_kcal_per_g,
            fat_kcal_per_g=self.fat_kcal_per_g,
            activity_multipliers=self.activity_multipliers,
        )
