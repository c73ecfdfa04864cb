"""
Persisted reload configuration model
"""
import math
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from siege_reload.models.weapon import (
    DEFAULT_BALLISTA_RELOAD_TIME,
    DEFAULT_CATAPULT_RELOAD_TIME,
    WeaponCategory,
)


class ReloadSettings(BaseModel):
    """Versioned reload durations for one activation cycle."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    version: str = Field(alias="Version")
    catapult_reload_seconds: float = Field(
        default=DEFAULT_CATAPULT_RELOAD_TIME,
        alias="Catapult Reload Duration Seconds",
    )
    ballista_reload_seconds: float = Field(
        default=DEFAULT_BALLISTA_RELOAD_TIME,
        alias="Ballista Reload Duration Seconds",
    )

    @field_validator("catapult_reload_seconds", "ballista_reload_seconds")
    @classmethod
    def validate_duration(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError("Reload duration must be a positive number of seconds")
        return value

    def durations(self) -> Dict[WeaponCategory, float]:
        return {
            WeaponCategory.CATAPULT: self.catapult_reload_seconds,
            WeaponCategory.BALLISTA: self.ballista_reload_seconds,
        }

    def with_version(self, version: str) -> "ReloadSettings":
        return self.model_copy(update={"version": version})

    def to_document(self) -> Dict[str, object]:
        """Serialize using the persisted key names."""
        return self.model_dump(by_alias=True)
