"""Helper utilities and fakes for tests."""

import json
from pathlib import Path
from typing import List

from automation.base import Keyboard, WindowQuery


class FakeClock:
    """Clock and sleep pair where sleeping advances the clock."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: List[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        # Always advance a little so poll loops terminate with zero delays
        self.now += seconds if seconds > 0 else 0.001


class FakeWindows(WindowQuery):
    """Window backend whose window appears after a number of queries.

    Args:
        appears_after: Number of exists() calls that return False first.
            None means the window never appears.
    """

    def __init__(self, appears_after=0):
        self.appears_after = appears_after
        self.exists_calls = 0
        self.activations = 0

    def exists(self, title: str) -> bool:
        self.exists_calls += 1
        if self.appears_after is None:
            return False
        return self.exists_calls > self.appears_after

    def activate(self, title: str) -> bool:
        self.activations += 1
        return True


class FakeKeyboard(Keyboard):
    """Records every key press and typed string."""

    def __init__(self):
        self.events: List[str] = []

    def press(self, key: str) -> None:
        self.events.append(key)

    def type_text(self, text: str) -> None:
        self.events.append(f"text:{text}")


def write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def populate_state(config) -> None:
    """Create a realistic, used editor data tree under the config paths."""
    app_dir = config.app_support_dir
    for name in ("Cache", "GPUCache", "Code Cache/js", "logs/20240101", "blob_storage"):
        directory = app_dir / name
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "data_0").write_text("cached", encoding="utf-8")
    (app_dir / "Cookies").write_text("cookie", encoding="utf-8")
    (app_dir / "Network Persistent State").write_text("{}", encoding="utf-8")

    config.cache_dir.mkdir(parents=True, exist_ok=True)
    (config.cache_dir / "index").write_text("idx", encoding="utf-8")

    write_json(
        config.storage_file,
        {
            "telemetry.machineId": "0" * 64,
            "telemetry.sqmId": "{00000000-0000-4000-8000-000000000000}",
            "telemetry.devDeviceId": "00000000-0000-4000-8000-000000000000",
            "backupWorkspaces": {"folders": []},
            "windowsState": {"lastActiveWindow": {}},
        },
    )
    (config.global_storage_dir / "state.vscdb").write_text("db", encoding="utf-8")
    (config.global_storage_dir / "codeium.windsurf").mkdir()
    (config.global_storage_dir / "codeium.windsurf" / "auth.json").write_text(
        "{}", encoding="utf-8"
    )

    (config.workspace_storage_dir / "abc123").mkdir(parents=True)
    (config.workspace_storage_dir / "abc123" / "workspace.json").write_text(
        "{}", encoding="utf-8"
    )
    (config.history_dir / "-1a2b").mkdir(parents=True)
    (config.history_dir / "-1a2b" / "entries.json").write_text("[]", encoding="utf-8")

    config.machine_id_file.write_text("stale-machine-guid\n", encoding="utf-8")


def snapshot(root: Path) -> List[str]:
    """Sorted relative paths of everything under root."""
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))
