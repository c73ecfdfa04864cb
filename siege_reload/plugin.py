"""
Instant Siege Reload plugin: host lifecycle hooks wired to the settings store and synchronizer
"""
import logging
from typing import Optional

from siege_reload import __version__
from siege_reload.models.reload_settings import ReloadSettings
from siege_reload.services.host_adapter import EntityEventSource, EntityRegistry, ReloadFieldAdapter
from siege_reload.services.reload_synchronizer import ReloadSynchronizer
from siege_reload.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

class InstantSiegeReload:
    """Plugin entry object; the host calls its hooks one at a time"""

    name = "Instant Siege Reload"
    version = __version__

    def __init__(
        self,
        registry: EntityRegistry,
        events: EntityEventSource,
        store: Optional[SettingsStore] = None,
        adapter: Optional[ReloadFieldAdapter] = None,
    ):
        self.store = store or SettingsStore()
        self.synchronizer = ReloadSynchronizer(registry, events, adapter=adapter)
        self.config: Optional[ReloadSettings] = None

    def init(self) -> None:
        """Load the config document; the host does this before the server is up"""
        self.config = self.store.load()
        logger.info(f"{self.name} v{self.version} loaded config from {self.store.path}")

    def on_server_initialized(self, is_startup: bool = False) -> None:
        if self.config is None:
            self.init()
        self.synchronizer.activate(self.config)

    def unload(self) -> None:
        self.synchronizer.deactivate()
        self.config = None
        logger.info(f"{self.name} unloaded")

    def reload_config(self) -> None:
        """Re-read the config document and push it to every live weapon"""
        self.config = self.store.load()
        if self.synchronizer.is_active():
            self.synchronizer.update_settings(self.config)
        logger.info(f"{self.name} config reloaded")
