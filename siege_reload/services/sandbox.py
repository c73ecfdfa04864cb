"""
In-memory stand-in for the game server's entity world.

Used by the console entry point and by tests to drive the plugin without a
running game server.
"""
import itertools
import logging
from typing import Any, Dict, List, Type

from siege_reload.models.weapon import DEFAULT_BALLISTA_RELOAD_TIME, DEFAULT_CATAPULT_RELOAD_TIME
from siege_reload.services.host_adapter import EntityHandler

logger = logging.getLogger(__name__)


class BaseEntity:
    """Minimal networkable entity"""

    def __init__(self, net_id: int):
        self.net_id = net_id
        self.IsDestroyed = False

    def __repr__(self):
        return f"{self.__class__.__name__}(net_id={self.net_id})"


class Catapult(BaseEntity):
    def __init__(self, net_id: int):
        super().__init__(net_id)
        self.reloadTime = DEFAULT_CATAPULT_RELOAD_TIME


class BallistaGun(BaseEntity):
    def __init__(self, net_id: int):
        super().__init__(net_id)
        self.reloadTime = DEFAULT_BALLISTA_RELOAD_TIME


class Barricade(BaseEntity):
    pass


class SandboxWorld:
    """Entity registry and spawn event source backed by a dict"""

    def __init__(self):
        self._entities: Dict[int, Any] = {}
        self._handlers: List[EntityHandler] = []
        self._ids = itertools.count(1)

    def all_entities(self) -> List[Any]:
        return list(self._entities.values())

    def subscribe(self, handler: EntityHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: EntityHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def spawn(self, entity_type: Type[BaseEntity]) -> BaseEntity:
        entity = entity_type(next(self._ids))
        self._entities[entity.net_id] = entity
        logger.debug(f"Spawned {entity!r}")
        for handler in list(self._handlers):
            handler(entity)
        return entity

    def destroy(self, entity: BaseEntity) -> None:
        entity.IsDestroyed = True
        self._entities.pop(entity.net_id, None)
