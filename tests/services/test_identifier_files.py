import json
import logging
import re

import pytest

from models.identifiers import IdentifierSet
from services.identifiers import PRESET_SETTINGS, IdentifierService
from services.state_reset import StateResetService
from tests.helpers import write_json

FIXED_IDS = IdentifierSet(
    machine_id="f" * 64,
    sqm_id="{aaaaaaaa-aaaa-4aaa-8aaa-aaaaaaaaaaaa}",
    dev_device_id="bbbbbbbb-bbbb-4bbb-9bbb-bbbbbbbbbbbb",
    machine_guid="cccccccc-cccc-4ccc-accc-cccccccccccc",
)


@pytest.fixture
def identifier_service(test_config):
    return IdentifierService(test_config, generator=lambda: FIXED_IDS)


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestRegenerate:
    """Tests for IdentifierService.regenerate."""

    def test_writes_settings(self, test_config, identifier_service):
        """Test that settings.json holds exactly the preset preferences."""
        identifier_service.regenerate()

        assert read_json(test_config.settings_file) == PRESET_SETTINGS
        # two-space indentation
        assert '\n  "workbench.startupEditor"' in test_config.settings_file.read_text()

    def test_settings_overwritten_not_merged(self, test_config, identifier_service):
        """Test that prior settings are discarded."""
        write_json(test_config.settings_file, {"editor.fontSize": 20})

        identifier_service.regenerate()

        assert "editor.fontSize" not in read_json(test_config.settings_file)

    def test_storage_has_exactly_expected_keys(self, test_config, identifier_service):
        """Test write-replace semantics of storage.json."""
        write_json(
            test_config.storage_file,
            {"telemetry.machineId": "old", "backupWorkspaces": {}, "windowsState": {}},
        )

        identifier_service.regenerate()

        assert read_json(test_config.storage_file) == {
            "telemetry.machineId": FIXED_IDS.machine_id,
            "telemetry.sqmId": FIXED_IDS.sqm_id,
            "telemetry.devDeviceId": FIXED_IDS.dev_device_id,
            "theme": "vs-dark",
            "themeBackground": "#1f1f1f",
        }

    def test_storage_uses_four_space_indent(self, test_config, identifier_service):
        identifier_service.regenerate()

        assert '\n    "telemetry.machineId"' in test_config.storage_file.read_text()

    def test_machine_id_file(self, test_config, identifier_service):
        """Test that machineid holds one id and a trailing newline."""
        test_config.machine_id_file.parent.mkdir(parents=True)
        test_config.machine_id_file.write_text("old-value\n")

        identifier_service.regenerate()

        assert test_config.machine_id_file.read_text() == FIXED_IDS.machine_guid + "\n"

    def test_creates_directory_layout(self, test_config, identifier_service):
        """Test that the user directories exist after regeneration."""
        identifier_service.regenerate()

        assert test_config.workspace_storage_dir.is_dir()
        assert test_config.history_dir.is_dir()
        assert test_config.global_storage_dir.is_dir()

    def test_layout_created_through_injected_state(self, test_config):
        """Test that the given state service recreates the layout."""

        class RecordingState(StateResetService):
            def __init__(self, config):
                super().__init__(config)
                self.layout_calls = 0

            def ensure_layout(self):
                self.layout_calls += 1

        state = RecordingState(test_config)
        service = IdentifierService(test_config, generator=lambda: FIXED_IDS, state=state)

        service.regenerate()

        assert state.layout_calls == 1
        assert not test_config.workspace_storage_dir.exists()

    def test_returns_written_identifiers(self, identifier_service):
        assert identifier_service.regenerate() is FIXED_IDS

    def test_default_generator_produces_fresh_values(self, test_config):
        """Test two runs with the real generator produce different ids."""
        service = IdentifierService(test_config)

        first = service.regenerate()
        second = service.regenerate()

        assert first.machine_id != second.machine_id
        stored = read_json(test_config.storage_file)
        assert stored["telemetry.machineId"] == second.machine_id
        assert re.match(r"^[0-9a-f]{64}$", stored["telemetry.machineId"])

    def test_one_failed_write_does_not_stop_others(
        self, test_config, identifier_service, caplog
    ):
        """Test that a blocked settings path only logs an error."""
        # A directory where settings.json should be makes the write fail
        test_config.settings_file.mkdir(parents=True)

        with caplog.at_level(logging.ERROR, logger="surfreset"):
            identifier_service.regenerate()

        assert "Failed to write settings.json" in caplog.text
        assert read_json(test_config.storage_file)["telemetry.machineId"] == "f" * 64
        assert test_config.machine_id_file.exists()


class TestResetMachineIds:
    """Tests for the in-place IdentifierService.reset_machine_ids."""

    def test_merges_into_existing_storage(self, test_config, identifier_service):
        """Test that unrelated keys survive and stale ones are dropped."""
        write_json(
            test_config.storage_file,
            {
                "telemetry.machineId": "old",
                "windowsState": {"x": 1},
                "backupWorkspaces": {},
                "profileAssociations": {},
                "windowControlHeight": 35,
                "lastKnownMenubarData": {},
            },
        )

        identifier_service.reset_machine_ids()

        assert read_json(test_config.storage_file) == {
            "telemetry.machineId": FIXED_IDS.machine_id,
            "telemetry.sqmId": FIXED_IDS.sqm_id,
            "telemetry.devDeviceId": FIXED_IDS.dev_device_id,
            "windowsState": {"x": 1},
        }
        assert test_config.machine_id_file.read_text() == FIXED_IDS.machine_guid + "\n"

    def test_missing_or_corrupt_storage_starts_empty(self, test_config, identifier_service):
        """Test that unreadable storage.json is replaced."""
        test_config.storage_file.parent.mkdir(parents=True)
        test_config.storage_file.write_text("{not json")

        identifier_service.reset_machine_ids()

        assert set(read_json(test_config.storage_file)) == {
            "telemetry.machineId",
            "telemetry.sqmId",
            "telemetry.devDeviceId",
        }


class TestDetectPaths:
    """Tests for IdentifierService.detect_paths."""

    def test_reports_existence(self, test_config, identifier_service):
        test_config.cache_dir.mkdir(parents=True)

        statuses = {s.name: s for s in identifier_service.detect_paths()}

        assert list(statuses) == [
            "app_support",
            "cache",
            "user_data",
            "logs",
            "storage_json",
            "machine_id_file",
        ]
        assert statuses["cache"].exists is True
        assert statuses["storage_json"].exists is False
        assert statuses["cache"].to_dict()["path"] == str(test_config.cache_dir)
