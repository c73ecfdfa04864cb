"""
Boundary between the plugin and host-owned entity objects.

The host exposes no public mutator for a weapon's reload time, so the value is
written straight into the private field on the entity instance. Everything
that touches host internals lives here; the synchronizer only sees
categories and the write/skip outcome.
"""
from typing import Any, Callable, Iterable, Optional, Protocol

from siege_reload.core.config import settings
from siege_reload.models.weapon import HOST_TYPE_NAMES, WeaponCategory

EntityHandler = Callable[[Any], None]


def _type_name(entity: Any) -> str:
    try:
        return entity.__class__.__name__
    except ReferenceError:
        return type(entity).__name__


class SiegeReloadError(Exception):
    """Base error for host integration failures"""


class FieldNotFoundError(SiegeReloadError):
    """The reload field cannot be resolved on the entity's runtime type"""

    def __init__(self, type_name: str, field_name: str):
        super().__init__(f"{type_name} has no writable field '{field_name}'")
        self.type_name = type_name
        self.field_name = field_name


class ObjectInvalidatedError(SiegeReloadError):
    """The entity was destroyed before the write happened"""


class EntityRegistry(Protocol):
    def all_entities(self) -> Iterable[Any]: ...


class EntityEventSource(Protocol):
    def subscribe(self, handler: EntityHandler) -> None: ...
    def unsubscribe(self, handler: EntityHandler) -> None: ...


class ReloadFieldAdapter:
    """Privileged access to the private reload-time field on host entities"""

    DESTROYED_FLAGS = ("IsDestroyed", "is_destroyed")

    def __init__(self, field_name: Optional[str] = None):
        self.field_name = field_name or settings.RELOAD_FIELD_NAME

    def category_of(self, entity: Any) -> Optional[WeaponCategory]:
        """Resolve the weapon category from the entity's runtime type, including subclasses."""
        if entity is None:
            return None
        try:
            # __class__ is forwarded by weak proxies, type() is not
            mro = entity.__class__.__mro__
        except ReferenceError:
            return None
        for klass in mro:
            category = HOST_TYPE_NAMES.get(klass.__name__)
            if category is not None:
                return category
        return None

    def is_valid(self, entity: Any) -> bool:
        if entity is None:
            return False
        try:
            return not any(bool(getattr(entity, flag, False)) for flag in self.DESTROYED_FLAGS)
        except ReferenceError:
            return False

    def write_reload_time(self, entity: Any, value: float) -> None:
        """
        Overwrite the entity's private reload field.

        Raises:
            ObjectInvalidatedError: entity is gone
            FieldNotFoundError: the field does not exist on the runtime type or is read-only
        """
        if not self.is_valid(entity):
            raise ObjectInvalidatedError(f"{_type_name(entity)} is no longer valid")

        type_name = _type_name(entity)
        try:
            # The field must already exist; never create new attributes on host objects.
            if not hasattr(entity, self.field_name):
                raise FieldNotFoundError(type_name, self.field_name)
            setattr(entity, self.field_name, float(value))
        except ReferenceError as e:
            raise ObjectInvalidatedError(f"{type_name} was released during write") from e
        except AttributeError as e:
            raise FieldNotFoundError(type_name, self.field_name) from e

    def read_reload_time(self, entity: Any) -> float:
        type_name = _type_name(entity)
        try:
            return float(getattr(entity, self.field_name))
        except ReferenceError as e:
            raise ObjectInvalidatedError(f"{type_name} was released") from e
        except AttributeError as e:
            raise FieldNotFoundError(type_name, self.field_name) from e
