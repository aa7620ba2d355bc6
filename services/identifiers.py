"""Identifier regeneration: settings.json, storage.json and machineid."""

import json
from pathlib import Path
from typing import Callable, List, Optional
from config import Config
from models.identifiers import IdentifierSet
from models.path_status import PathStatus
from services.filesystem import best_effort, remove_path
from services.state_reset import StateResetService
from logger import get_logger

logger = get_logger()

PRESET_SETTINGS = {
    "workbench.startupEditor": "none",
    "workbench.welcomePage.walkthroughs.openOnInstall": False,
    "telemetry.telemetryLevel": "off",
    "window.commandCenter": True,
    "explorer.confirmDragAndDrop": False,
    "explorer.confirmDelete": False,
}

STORAGE_THEME = {
    "theme": "vs-dark",
    "themeBackground": "#1f1f1f",
}

# Dropped from storage.json by the in-place reset
STALE_STORAGE_KEYS = [
    "backupWorkspaces",
    "profileAssociations",
    "windowControlHeight",
    "lastKnownMenubarData",
]


class IdentifierService:
    """Writes freshly generated identifiers into the editor's state files.

    Args:
        config: Application configuration with the path table.
        generator: Factory for new identifier sets, injectable for tests.
        state: Service that recreates the directory layout after the
            files are written. Defaults to one built from config.
    """

    def __init__(
        self,
        config: Config,
        generator: Callable[[], IdentifierSet] = IdentifierSet.generate,
        state: Optional[StateResetService] = None,
    ):
        self.config = config
        self.generator = generator
        self.state = state or StateResetService(config)

    def _new_identifiers(self) -> IdentifierSet:
        ids = self.generator()
        logger.info(f"  New machineId: {ids.machine_id}")
        logger.info(f"  New sqmId: {ids.sqm_id}")
        logger.info(f"  New devDeviceId: {ids.dev_device_id}")
        logger.info(f"  New machineid: {ids.machine_guid}")
        return ids

    def _replace_file(self, path: Path, content: str) -> None:
        # Not atomic: the old file is gone before the new one is written
        path.parent.mkdir(parents=True, exist_ok=True)
        remove_path(path, path.name)
        path.write_text(content, encoding="utf-8")

    def write_settings(self) -> None:
        """Overwrite settings.json with the preset preferences."""
        settings_file = self.config.settings_file
        with best_effort("to write settings.json"):
            settings_file.parent.mkdir(parents=True, exist_ok=True)
            settings_file.write_text(
                json.dumps(PRESET_SETTINGS, indent=2), encoding="utf-8"
            )
            logger.info("  ✓ Created: settings.json")

    def write_storage(self, ids: IdentifierSet) -> None:
        """Replace storage.json with the new identifiers and theme keys."""
        data = {**ids.storage_entries(), **STORAGE_THEME}
        with best_effort("to write storage.json"):
            self._replace_file(self.config.storage_file, json.dumps(data, indent=4))
            logger.info("  ✓ Created: storage.json")

    def write_machine_id(self, ids: IdentifierSet) -> None:
        """Replace the machineid file with the new machine guid."""
        with best_effort("to write machineid"):
            self._replace_file(self.config.machine_id_file, ids.machine_guid + "\n")
            logger.info("  ✓ Created: machineid")

    def regenerate(self) -> IdentifierSet:
        """Generate new identifiers and write all identifier files.

        Each file is written independently; a failure is logged and the
        remaining files are still written.

        Returns:
            The identifier set that was written.
        """
        logger.info("\n📝 Creating preset configuration...")

        ids = self._new_identifiers()
        self.write_settings()
        self.write_storage(ids)
        self.write_machine_id(ids)
        self.state.ensure_layout()

        return ids

    def reset_machine_ids(self) -> IdentifierSet:
        """Swap identifiers inside the existing storage.json, keeping other keys.

        Unlike regenerate(), unrelated keys survive, except a few that
        reference previous sessions.

        Returns:
            The identifier set that was written.
        """
        logger.info("\n🔧 Resetting machine identifiers...")

        ids = self._new_identifiers()
        storage_file = self.config.storage_file

        try:
            data = json.loads(storage_file.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                data = {}
        except (OSError, ValueError):
            data = {}

        data.update(ids.storage_entries())
        for key in STALE_STORAGE_KEYS:
            data.pop(key, None)

        with best_effort("to update storage.json"):
            storage_file.parent.mkdir(parents=True, exist_ok=True)
            storage_file.write_text(json.dumps(data, indent=4), encoding="utf-8")
            logger.info("  ✓ Updated: storage.json")

        with best_effort("to update machineid"):
            machine_id_file = self.config.machine_id_file
            machine_id_file.parent.mkdir(parents=True, exist_ok=True)
            machine_id_file.write_text(ids.machine_guid + "\n", encoding="utf-8")
            logger.info("  ✓ Updated: machineid")

        return ids

    def detect_paths(self) -> List[PathStatus]:
        """Report which of the known editor paths exist.

        Returns:
            One PathStatus per logical path, in a fixed order.
        """
        table = [
            ("app_support", self.config.app_support_dir),
            ("cache", self.config.cache_dir),
            ("user_data", self.config.user_data_dir),
            ("logs", self.config.logs_dir),
            ("storage_json", self.config.storage_file),
            ("machine_id_file", self.config.machine_id_file),
        ]
        return [PathStatus(name=name, path=path, exists=path.exists()) for name, path in table]
