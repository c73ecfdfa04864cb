import logging

from main import _report
from siege_reload.services.host_adapter import ReloadFieldAdapter
from siege_reload.services.sandbox import BallistaGun, Barricade, Catapult, SandboxWorld


def test_report_reads_weapons_through_adapter(caplog):
    world = SandboxWorld()
    catapult = world.spawn(Catapult)
    world.spawn(BallistaGun)
    world.spawn(Barricade)
    catapult.reloadTime = 1.25

    with caplog.at_level(logging.INFO, logger="main"):
        _report(world, ReloadFieldAdapter("reloadTime"), "check")

    assert "[check] Catapult(net_id=1) reload=1.25s" in caplog.text
    assert "[check] BallistaGun(net_id=2) reload=3.0s" in caplog.text
    assert "Barricade" not in caplog.text


def test_report_warns_when_field_is_missing(caplog):
    world = SandboxWorld()
    world.spawn(Catapult)

    with caplog.at_level(logging.INFO, logger="main"):
        _report(world, ReloadFieldAdapter("reloadTimer"), "check")

    assert "Catapult(net_id=1) unreadable" in caplog.text
    assert "reload=" not in caplog.text
