"""Cache and user data purging."""

from typing import List
from config import Config
from services.filesystem import remove_path, recreate_dir, best_effort
from logger import get_logger

logger = get_logger()

# Entries under the app support directory removed on every reset
DELETE_ENTRIES = [
    "Cache",
    "CachedData",
    "CachedExtensionVSIXs",
    "CachedProfilesData",
    "Code Cache",
    "Cookies",
    "Cookies-journal",
    "Crashpad",
    "DawnGraphiteCache",
    "DawnWebGPUCache",
    "GPUCache",
    "Local Storage",
    "Session Storage",
    "Shared Dictionary",
    "SharedStorage",
    "TransportSecurity",
    "Trust Tokens",
    "Trust Tokens-journal",
    "blob_storage",
    "logs",
    "Network Persistent State",
]

# The only globalStorage entry that survives a purge
KEEP_IN_GLOBAL_STORAGE = "storage.json"


class StateResetService:
    """Service for wiping the editor's caches and session state."""

    def __init__(self, config: Config):
        """Initialize the state reset service.

        Args:
            config: Application configuration with the path table.
        """
        self.config = config

    def purge_caches(self) -> List[str]:
        """Delete the fixed cache entries and the local cache directory.

        Missing entries are skipped.

        Returns:
            Labels of the entries actually removed.
        """
        logger.info("\n🗑️  Deleting caches and data...")

        removed = []
        for entry in DELETE_ENTRIES:
            if remove_path(self.config.app_support_dir / entry, entry):
                removed.append(entry)

        if remove_path(self.config.cache_dir, "Cache (local)"):
            removed.append("Cache (local)")

        return removed

    def purge_user_data(self) -> List[str]:
        """Clear globalStorage (except storage.json), workspaceStorage and History.

        Returns:
            Labels of the entries removed or emptied.
        """
        logger.info("\n🧹 Cleaning user data...")

        if not self.config.user_data_dir.is_dir():
            logger.warning("  ⚠️  User directory does not exist")
            return []

        removed = []
        global_storage = self.config.global_storage_dir
        if global_storage.is_dir():
            for item in sorted(global_storage.iterdir()):
                if item.name == KEEP_IN_GLOBAL_STORAGE:
                    continue
                label = f"globalStorage/{item.name}"
                if remove_path(item, label):
                    removed.append(label)

        for directory in (
            self.config.workspace_storage_dir,
            self.config.history_dir,
        ):
            if recreate_dir(directory, directory.name):
                logger.info(f"  ✓ Cleaned: {directory.name}")
                removed.append(directory.name)

        return removed

    def ensure_layout(self) -> None:
        """Create the directories the editor expects on first start."""
        with best_effort("to create user directories"):
            for directory in (
                self.config.workspace_storage_dir,
                self.config.history_dir,
                self.config.global_storage_dir,
            ):
                directory.mkdir(parents=True, exist_ok=True)
            logger.info("  ✓ Created required directories")
