"""
Main entry point for Instant Siege Reload

Runs the plugin lifecycle against the in-memory sandbox world and reports the
reload time of every weapon at each stage.
"""
import logging

from siege_reload.core.logging_config import configure_logging
from siege_reload.plugin import InstantSiegeReload
from siege_reload.services.host_adapter import ReloadFieldAdapter, SiegeReloadError
from siege_reload.services.sandbox import BallistaGun, Barricade, Catapult, SandboxWorld

logger = logging.getLogger(__name__)


def _report(world: SandboxWorld, adapter: ReloadFieldAdapter, stage: str) -> None:
    for entity in world.all_entities():
        if adapter.category_of(entity) is None:
            continue
        try:
            reload_time = adapter.read_reload_time(entity)
        except SiegeReloadError as e:
            logger.warning(f"[{stage}] {entity!r} unreadable: {e}")
            continue
        logger.info(f"[{stage}] {entity!r} reload={reload_time}s")


def main():
    configure_logging()

    world = SandboxWorld()
    world.spawn(Catapult)
    world.spawn(Catapult)
    world.spawn(BallistaGun)
    world.spawn(Barricade)

    plugin = InstantSiegeReload(world, world)
    plugin.init()
    plugin.on_server_initialized(is_startup=True)
    _report(world, plugin.synchronizer.adapter, "activated")

    world.spawn(BallistaGun)
    _report(world, plugin.synchronizer.adapter, "spawned")

    plugin.unload()
    _report(world, plugin.synchronizer.adapter, "unloaded")


if __name__ == "__main__":
    main()
