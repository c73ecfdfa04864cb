import json

from siege_reload.plugin import InstantSiegeReload
from siege_reload.services.sandbox import BallistaGun, Catapult, SandboxWorld
from siege_reload.services.settings_store import SettingsStore


def _plugin(tmp_path, document=None):
    path = tmp_path / "InstantSiegeReload.json"
    if document is not None:
        path.write_text(json.dumps(document), encoding="utf-8")
    world = SandboxWorld()
    plugin = InstantSiegeReload(world, world, store=SettingsStore(path, current_version="1.0.1"))
    return plugin, world


def test_full_lifecycle_with_custom_config(tmp_path):
    plugin, world = _plugin(tmp_path, {
        "Version": "1.0.0",
        "Catapult Reload Duration Seconds": 10.0,
        "Ballista Reload Duration Seconds": 5.0,
    })
    catapults = [world.spawn(Catapult), world.spawn(Catapult)]
    ballista = world.spawn(BallistaGun)

    plugin.init()
    plugin.on_server_initialized(is_startup=True)

    assert [c.reloadTime for c in catapults] == [10.0, 10.0]
    assert ballista.reloadTime == 5.0
    assert world.spawn(Catapult).reloadTime == 10.0

    plugin.unload()

    assert plugin.config is None
    assert all(c.reloadTime == 6.0 for c in world.all_entities() if isinstance(c, Catapult))
    assert ballista.reloadTime == 3.0
    assert world.subscriber_count == 0


def test_server_initialized_loads_config_when_init_was_skipped(tmp_path):
    plugin, world = _plugin(tmp_path)
    catapult = world.spawn(Catapult)

    plugin.on_server_initialized()

    assert plugin.config == plugin.store.defaults()
    assert catapult.reloadTime == 6.0
    assert plugin.store.path.exists()


def test_reload_config_pushes_new_values_to_live_weapons(tmp_path):
    plugin, world = _plugin(tmp_path)
    catapult = world.spawn(Catapult)
    plugin.init()
    plugin.on_server_initialized()

    plugin.store.path.write_text(json.dumps({
        "Version": "1.0.1",
        "Catapult Reload Duration Seconds": 0.5,
        "Ballista Reload Duration Seconds": 0.25,
    }), encoding="utf-8")
    plugin.reload_config()

    assert catapult.reloadTime == 0.5
    assert world.spawn(BallistaGun).reloadTime == 0.25
    assert plugin.synchronizer.settings.catapult_reload_seconds == 0.5
