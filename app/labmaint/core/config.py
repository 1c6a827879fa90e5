"""Maintenance configuration and settings.

The built-in defaults are the lab's standing policy: which user's folders
are wiped, which applications and packages are removed, and where the
BleachBit preset comes from. An optional TOML file can override any of
them, e.g.::

    target_user = "student"
    flatpak_apps = ["org.kde.gcompris"]

    [colors]
    header = "#5f87ff"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated
from urllib.parse import urlsplit

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from labmaint.core.paths import (
    DEFAULT_CLEANUP_CONFIG_DIR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_LOG_PATH,
    get_home_dir,
)
from labmaint.core.theme import ThemeColors

logger = logging.getLogger(__name__)

DEFAULT_TARGET_USER = "copesal"

DEFAULT_CLEANUP_CONFIG_URL = (
    "https://github.com/fcortesjp/school-maintenance/raw/refs/heads/main/bleachbit.ini"
)

# Home subfolders of the target user whose contents are wiped each run
DEFAULT_FOLDER_NAMES: tuple[str, ...] = ("Downloads", "Pictures")

DEFAULT_FLATPAK_APPS: tuple[str, ...] = (
    "ch.openboard.OpenBoard",
    "com.github.johnfactotum.Foliate",
    "com.github.xournalpp.xournalpp",
    "com.logseq.Logseq",
    "edu.mit.Scratch",
    "io.gdevelop.ide",
    "org.fritzing.Fritzing",
    "org.kde.gcompris",
    "org.learningequality.Kolibri",
    "com.github.phase1geo.minder",
    "org.kde.minuet",
)

DEFAULT_APT_PACKAGES: tuple[str, ...] = (
    "thunderbird",
    "libreoffice-base",
    "audacity",
    "musescore",
    "transmission-gtk",
    "hexchat",
    "aisleriot",
    "gnome-mahjongg",
    "gnome-mines",
    "gnome-sudoku",
)


class MaintenanceConfig(BaseModel):
    """Settings for one maintenance run.

    Attributes:
        target_user: User whose home subfolders are purged.
        log_path: Append-only audit log.
        cleanup_config_url: Where the BleachBit preset file is downloaded from.
        cleanup_config_dir: Directory the preset file is written to.
        folders: Absolute folders whose contents are purged. None means the
            default Downloads/Pictures folders of ``target_user``.
        flatpak_apps: Flatpak application IDs to uninstall.
        apt_packages: APT packages to purge.
        colors: Console color overrides.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_user: Annotated[
        str,
        Field(min_length=1, description="User whose folders are cleaned"),
    ] = DEFAULT_TARGET_USER
    log_path: Annotated[
        Path,
        Field(description="Audit log file"),
    ] = DEFAULT_LOG_PATH
    cleanup_config_url: Annotated[
        str,
        Field(min_length=1, description="BleachBit preset download URL"),
    ] = DEFAULT_CLEANUP_CONFIG_URL
    cleanup_config_dir: Annotated[
        Path,
        Field(description="Directory for the BleachBit preset"),
    ] = DEFAULT_CLEANUP_CONFIG_DIR
    folders: Annotated[
        list[str] | None,
        Field(description="Folders to empty (None = target user's defaults)"),
    ] = None
    flatpak_apps: list[str] = Field(default_factory=lambda: list(DEFAULT_FLATPAK_APPS))
    apt_packages: list[str] = Field(default_factory=lambda: list(DEFAULT_APT_PACKAGES))
    colors: ThemeColors = Field(default_factory=ThemeColors)

    @field_validator("cleanup_config_url")
    @classmethod
    def validate_cleanup_config_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            msg = f"cleanup_config_url: must be an http(s) URL: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("folders")
    @classmethod
    def validate_folders(cls, v: list[str] | None) -> list[str] | None:
        """Reject empty or relative folder paths."""
        if v is None:
            return v
        for folder in v:
            if not folder.strip():
                msg = "folders: empty path is not allowed"
                raise ValueError(msg)
            if not folder.startswith("/"):
                msg = f"folders: path must be absolute: {folder!r}"
                raise ValueError(msg)
        return v

    @property
    def effective_folders(self) -> list[str]:
        """Get the folders to purge.

        Returns the configured folders if set, otherwise the default
        subfolders of the target user's home directory.
        """
        if self.folders is not None:
            return list(self.folders)
        home = get_home_dir(self.target_user)
        return [str(home / name) for name in DEFAULT_FOLDER_NAMES]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> MaintenanceConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated MaintenanceConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return MaintenanceConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def resolve_config(path: Path | None = None) -> MaintenanceConfig:
    """Resolve the configuration for a run.

    An explicitly given file must exist. Without one, the default config
    path is used when present and the built-in defaults otherwise.

    Args:
        path: Explicit config file, or None.

    Returns:
        Validated MaintenanceConfig object.

    Raises:
        ConfigError: If the chosen file is missing or invalid.
    """
    if path is not None:
        return load_config(path)

    if DEFAULT_CONFIG_PATH.exists():
        logger.debug("Loading config overrides from %s", DEFAULT_CONFIG_PATH)
        return load_config(DEFAULT_CONFIG_PATH)

    return get_default_config()


def save_config(config: MaintenanceConfig, path: Path) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The MaintenanceConfig object to save.
        path: Destination path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return path


def _config_to_dict(config: MaintenanceConfig) -> dict[str, object]:
    """Convert MaintenanceConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset ``folders`` is written out as the
    effective folder list.

    Args:
        config: The MaintenanceConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    data: dict[str, object] = config.model_dump(mode="json", exclude={"folders"})
    data["folders"] = config.effective_folders
    return data


def get_default_config() -> MaintenanceConfig:
    """Create a default MaintenanceConfig.

    Returns:
        MaintenanceConfig with the built-in lab policy.
    """
    return MaintenanceConfig()
