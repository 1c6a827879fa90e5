"""Fixed filesystem locations used by labmaint.

The maintenance run always executes as root, so these are system paths
rather than XDG per-user directories.
"""

from pathlib import Path

# Application identifier for directory naming
APP_NAME = "labmaint"

# Append-only audit log of every maintenance run
DEFAULT_LOG_PATH = Path("/var/log/school_maintenance.log")

# Optional override file for the built-in settings
DEFAULT_CONFIG_PATH = Path("/etc") / APP_NAME / "config.toml"

# BleachBit reads its preset configuration from root's config directory
DEFAULT_CLEANUP_CONFIG_DIR = Path("/root/.config/bleachbit")
CLEANUP_CONFIG_FILENAME = "bleachbit.ini"

HOME_ROOT = Path("/home")


def get_home_dir(user: str) -> Path:
    """Get the home directory of a lab user.

    Args:
        user: Login name.

    Returns:
        Path to /home/<user>.
    """
    return HOME_ROOT / user


def get_cleanup_config_path(config_dir: Path = DEFAULT_CLEANUP_CONFIG_DIR) -> Path:
    """Get the BleachBit configuration file path.

    Args:
        config_dir: Directory holding the BleachBit configuration.

    Returns:
        Path to <config_dir>/bleachbit.ini.
    """
    return config_dir / CLEANUP_CONFIG_FILENAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
