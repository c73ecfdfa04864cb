"""
Siege weapon categories recognised by the plugin
"""
from enum import Enum
from typing import Dict


class WeaponCategory(Enum):
    """Weapon kinds whose reload time is managed"""
    CATAPULT = "catapult"
    BALLISTA = "ballista"


# Host runtime type names for each category
HOST_TYPE_NAMES: Dict[str, WeaponCategory] = {
    "Catapult": WeaponCategory.CATAPULT,
    "BallistaGun": WeaponCategory.BALLISTA,
}

DEFAULT_CATAPULT_RELOAD_TIME = 6.0
DEFAULT_BALLISTA_RELOAD_TIME = 3.0

# Values the host ships with; restored on unload
FACTORY_RELOAD_TIMES: Dict[WeaponCategory, float] = {
    WeaponCategory.CATAPULT: DEFAULT_CATAPULT_RELOAD_TIME,
    WeaponCategory.BALLISTA: DEFAULT_BALLISTA_RELOAD_TIME,
}
