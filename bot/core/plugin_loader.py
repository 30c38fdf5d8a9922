from __future__ import annotations

import logging
from collections.abc import Mapping
from types import ModuleType
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from ..plugins.base import BasePlugin

logger = logging.getLogger(__name__)


class PluginMetadata:
    def __init__(
        self,
        name: str,
        version: str = "1.0.0",
        author: str = "Unknown",
        description: str = "",
        dependencies: Optional[List[str]] = None,
    ) -> None:
        self.name = name
        self.version = version
        self.author = author
        self.description = description
        self.dependencies = dependencies or []


class PluginLoader:
    """Loads plugins from an explicit name -> package table.

    Each package exposes ``PLUGIN_METADATA`` and ``setup(bot)`` returning a
    :class:`BasePlugin` instance.
    """

    def __init__(self, bot: Any, available: Mapping[str, ModuleType]) -> None:
        self.bot = bot
        self.available: Dict[str, ModuleType] = dict(available)
        self.plugins: Dict[str, BasePlugin] = {}
        self.plugin_metadata: Dict[str, PluginMetadata] = {}

    def get_available_plugins(self) -> List[str]:
        return list(self.available.keys())

    @staticmethod
    def extract_metadata(module: Any) -> PluginMetadata:
        if hasattr(module, "PLUGIN_METADATA"):
            meta_dict = module.PLUGIN_METADATA
            return PluginMetadata(
                name=meta_dict.get("name", "Unknown"),
                version=meta_dict.get("version", "1.0.0"),
                author=meta_dict.get("author", "Unknown"),
                description=meta_dict.get("description", ""),
                dependencies=meta_dict.get("dependencies", []),
            )
        else:
            return PluginMetadata(name=module.__name__)

    async def load_plugin(self, plugin_name: str) -> bool:
        try:
            # Check if plugin is already loaded
            if plugin_name in self.plugins:
                logger.info(f"Plugin {plugin_name} is already loaded")
                return True

            module = self.available.get(plugin_name)
            if module is None:
                logger.error(f"Plugin {plugin_name} is not registered")
                return False

            metadata = self.extract_metadata(module)

            # Check dependencies
            for dep in metadata.dependencies:
                if dep not in self.plugins:
                    logger.error(f"Plugin {plugin_name} requires {dep} which is not loaded")
                    return False

            plugin_instance = module.setup(self.bot)
            await plugin_instance.on_load()

            self.plugins[plugin_name] = plugin_instance
            self.plugin_metadata[plugin_name] = metadata

            logger.info(f"Successfully loaded plugin: {plugin_name} v{metadata.version}")
            return True

        except Exception as e:
            logger.error(f"Failed to load plugin {plugin_name}: {e}")
            return False

    async def unload_plugin(self, plugin_name: str) -> bool:
        try:
            if plugin_name not in self.plugins:
                logger.warning(f"Plugin {plugin_name} is not loaded")
                return False

            plugin = self.plugins[plugin_name]
            await plugin.on_unload()

            del self.plugins[plugin_name]
            del self.plugin_metadata[plugin_name]

            logger.info(f"Successfully unloaded plugin: {plugin_name}")
            return True

        except Exception as e:
            logger.error(f"Failed to unload plugin {plugin_name}: {e}")
            return False

    async def load_all_plugins(self, enabled_plugins: List[str]) -> None:
        for plugin_name in enabled_plugins:
            await self.load_plugin(plugin_name)

    async def unload_all_plugins(self) -> None:
        # Dependents unload first
        for plugin_name in reversed(list(self.plugins.keys())):
            await self.unload_plugin(plugin_name)

    def get_plugin(self, plugin_name: str) -> Optional[BasePlugin]:
        return self.plugins.get(plugin_name)

    def get_loaded_plugins(self) -> List[str]:
        return list(self.plugins.keys())

    def get_plugin_info(self, plugin_name: str) -> Optional[PluginMetadata]:
        return self.plugin_metadata.get(plugin_name)
