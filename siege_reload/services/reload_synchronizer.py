"""
Keeps the reload time of every live siege weapon in sync with the active settings
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from siege_reload.models.reload_settings import ReloadSettings
from siege_reload.models.weapon import FACTORY_RELOAD_TIMES, WeaponCategory
from siege_reload.services.host_adapter import (
    EntityEventSource,
    EntityRegistry,
    FieldNotFoundError,
    ObjectInvalidatedError,
    ReloadFieldAdapter,
)

logger = logging.getLogger(__name__)

class SyncState(Enum):
    """Synchronizer lifecycle states"""
    INACTIVE = "inactive"
    ACTIVE = "active"

@dataclass
class SweepReport:
    """Outcome of one pass over the live entity population"""
    updated: int = 0
    skipped_invalid: int = 0
    skipped_missing_field: int = 0
    ignored: int = 0

    @property
    def skipped(self) -> int:
        return self.skipped_invalid + self.skipped_missing_field

class ReloadSynchronizer:
    """Applies configured reload durations to existing and newly created weapons"""

    def __init__(
        self,
        registry: EntityRegistry,
        events: EntityEventSource,
        adapter: Optional[ReloadFieldAdapter] = None,
    ):
        self.registry = registry
        self.events = events
        self.adapter = adapter or ReloadFieldAdapter()

        self.state = SyncState.INACTIVE
        self._settings: Optional[ReloadSettings] = None

    @property
    def settings(self) -> Optional[ReloadSettings]:
        return self._settings

    def is_active(self) -> bool:
        return self.state == SyncState.ACTIVE

    def activate(self, reload_settings: ReloadSettings) -> SweepReport:
        """Sweep with the configured durations and start listening for new entities"""
        if self.state != SyncState.INACTIVE:
            logger.warning("Reload synchronizer is already active")
            return SweepReport()

        self._settings = reload_settings
        report = self.apply_to_all(reload_settings.durations())
        self.events.subscribe(self.on_entity_created)
        self.state = SyncState.ACTIVE

        logger.info(
            f"Reload synchronizer active (catapult={reload_settings.catapult_reload_seconds}s, "
            f"ballista={reload_settings.ballista_reload_seconds}s)"
        )
        return report

    def deactivate(self) -> SweepReport:
        """Put factory reload times back and stop listening"""
        if self.state != SyncState.ACTIVE:
            logger.warning("Reload synchronizer is not active")
            return SweepReport()

        report = self.restore_factory_defaults()
        self.events.unsubscribe(self.on_entity_created)
        self._settings = None
        self.state = SyncState.INACTIVE

        logger.info("Reload synchronizer inactive, factory reload times restored")
        return report

    def update_settings(self, reload_settings: ReloadSettings) -> SweepReport:
        """Swap in new settings while active and re-apply them to every live weapon"""
        if self.state != SyncState.ACTIVE:
            logger.warning("Cannot update settings while the reload synchronizer is inactive")
            return SweepReport()

        self._settings = reload_settings
        return self.apply_to_all(reload_settings.durations())

    def apply_to_all(self, durations: Mapping[WeaponCategory, float]) -> SweepReport:
        """
        Write reload durations to every live weapon of a mapped category.

        Args:
            durations: Reload seconds keyed by weapon category; categories not
                present in the mapping are left untouched

        Returns:
            SweepReport with per-outcome counts
        """
        report = SweepReport()

        for entity in self.registry.all_entities():
            category = self.adapter.category_of(entity)
            if category is None or category not in durations:
                report.ignored += 1
                continue

            try:
                self.adapter.write_reload_time(entity, durations[category])
                report.updated += 1
            except ObjectInvalidatedError:
                report.skipped_invalid += 1
                logger.debug(f"Skipping invalidated {type(entity).__name__}")
            except FieldNotFoundError as e:
                report.skipped_missing_field += 1
                logger.warning(f"Skipping reload update: {e}")

        logger.info(
            f"Reload sweep complete: {report.updated} updated, {report.skipped} skipped"
        )
        return report

    def apply_to_one(self, entity: Any, duration: float) -> bool:
        """Write a reload duration to a single weapon; returns False when skipped"""
        try:
            self.adapter.write_reload_time(entity, duration)
            return True
        except ObjectInvalidatedError:
            logger.debug(f"Skipping invalidated {type(entity).__name__}")
        except FieldNotFoundError as e:
            logger.warning(f"Skipping reload update: {e}")
        return False

    def restore_factory_defaults(self) -> SweepReport:
        return self.apply_to_all(FACTORY_RELOAD_TIMES)

    def on_entity_created(self, entity: Any) -> None:
        """Creation-event handler: patch new catapults and ballistas on spawn"""
        if self._settings is None:
            return

        category = self.adapter.category_of(entity)
        if category is None:
            return

        self.apply_to_one(entity, self._settings.durations()[category])
