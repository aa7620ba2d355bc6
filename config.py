"""Configuration management for SurfReset.

Paths are derived once from environment variables; user-tunable settings
(logging, target app names, timing) are read from ~/.config/surfreset.toml,
which is created with defaults if needed.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field, fields, asdict, replace
from typing import List, Mapping
import tomllib
import tomli_w


@dataclass
class Timing:
    """Fixed delays (seconds) and press counts used by the reset flow."""

    terminate_wait: float = 2.0
    post_close_wait: float = 3.0
    post_reset_wait: float = 2.0
    post_launch_wait: float = 5.0
    window_timeout: float = 30.0
    window_poll_interval: float = 1.0
    settle_delay: float = 3.0
    activate_delay: float = 0.5
    pre_confirm_delay: float = 0.2
    confirm_delay: float = 0.5
    between_pages_delay: float = 0.8
    navigate_delay: float = 0.3
    final_delay: float = 2.0
    confirm_pages: int = 3
    navigate_presses: int = 3

    @classmethod
    def instant(cls) -> "Timing":
        """Same sequence with every delay set to zero.

        window_timeout is a deadline rather than a delay and keeps its default.
        """
        zeroed = {
            f.name: 0.0
            for f in fields(cls)
            if isinstance(f.default, float) and f.name != "window_timeout"
        }
        return cls(**zeroed)


@dataclass
class Config:
    """Application configuration."""

    app_name: str
    process_name: str
    window_title: str
    app_support_dir: Path
    cache_dir: Path
    user_data_dir: Path
    logs_dir: Path
    executable_candidates: List[Path]
    log_level: str
    log_dir: Path
    timing: Timing = field(default_factory=Timing)

    @property
    def storage_file(self) -> Path:
        """storage.json holding the telemetry identifiers."""
        return self.app_support_dir / "User" / "globalStorage" / "storage.json"

    @property
    def machine_id_file(self) -> Path:
        return self.app_support_dir / "machineid"

    @property
    def settings_file(self) -> Path:
        return self.app_support_dir / "User" / "settings.json"

    @property
    def global_storage_dir(self) -> Path:
        return self.user_data_dir / "globalStorage"

    @property
    def workspace_storage_dir(self) -> Path:
        return self.user_data_dir / "workspaceStorage"

    @property
    def history_dir(self) -> Path:
        return self.user_data_dir / "History"

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str],
        app_name: str = "Windsurf",
        process_name: str = "Windsurf.exe",
        window_title: str = "Windsurf",
    ) -> "Config":
        """Build the path table from Windows-style environment variables.

        Missing variables fall back to locations under the home directory,
        so a Config can always be constructed (e.g. on a dev machine).

        Args:
            env: Mapping of environment variables (usually os.environ).
            app_name: Directory name the editor uses for its data.
            process_name: Image name of the running editor.
            window_title: Title of the editor's main window.
        """
        home = Path(env.get("USERPROFILE") or Path.home())
        app_data = Path(env.get("APPDATA") or home / "AppData" / "Roaming")
        local_app_data = Path(env.get("LOCALAPPDATA") or home / "AppData" / "Local")
        program_files = Path(env.get("PROGRAMFILES") or "C:/Program Files")
        program_files_x86 = Path(
            env.get("PROGRAMFILES(X86)") or "C:/Program Files (x86)"
        )

        app_support_dir = app_data / app_name
        executable = f"{app_name}.exe"

        return cls(
            app_name=app_name,
            process_name=process_name,
            window_title=window_title,
            app_support_dir=app_support_dir,
            cache_dir=local_app_data / app_name / "Cache",
            user_data_dir=app_support_dir / "User",
            logs_dir=app_support_dir / "logs",
            executable_candidates=[
                local_app_data / "Programs" / app_name / executable,
                program_files / app_name / executable,
                program_files_x86 / app_name / executable,
            ],
            log_level="INFO",
            log_dir=home / "data" / "surfreset" / "logs",
        )

    @classmethod
    def default(cls) -> "Config":
        """Create a Config from the current process environment."""
        return cls.from_environment(os.environ)


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "surfreset.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return config_from_dict(data, os.environ)


def config_from_dict(data: dict, env: Mapping[str, str]) -> Config:
    """Apply parsed TOML data on top of environment-derived defaults.

    Args:
        data: Parsed TOML document.
        env: Environment mapping used to compute paths.

    Returns:
        Config object.
    """
    app_config = data.get("app", {})
    config = Config.from_environment(
        env,
        app_name=app_config.get("name", "Windsurf"),
        process_name=app_config.get("process_name", "Windsurf.exe"),
        window_title=app_config.get("window_title", "Windsurf"),
    )

    log_config = data.get("logging", {})
    config.log_level = log_config.get("level", config.log_level)
    config.log_dir = Path(log_config.get("log_dir", config.log_dir))

    # Unknown timing keys are ignored
    timing_config = data.get("timing", {})
    known = {f.name for f in fields(Timing)}
    overrides = {k: v for k, v in timing_config.items() if k in known}
    config.timing = replace(Timing(), **overrides)

    return config


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "app": {
            "name": config.app_name,
            "process_name": config.process_name,
            "window_title": config.window_title,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "timing": asdict(config.timing),
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
