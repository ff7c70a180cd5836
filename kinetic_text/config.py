# kinetic_text/config.py
# Description: Configuration management for kinetic_text.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "kinetic_text" / "config.toml"
CONFIG_PATH_ENV = "KINETIC_TEXT_CONFIG"

CONFIG_TOML_CONTENT = """
# Configuration for kinetic_text
# This file is created with default values on first run.

[general]
# TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL
log_level = "INFO"
# Written next to this config file when the gallery runs
log_filename = "kinetic_text.log"

[motion]
# Replace every effect with its settled final state
reduce_motion = false
# Seconds between animation ticks
frame_interval = 0.033
# Visible fraction at which on_visible effects start
visible_threshold = 0.15
# Scroll velocity smoothing: v = v * retain + instantaneous * (1 - retain)
velocity_retain = 0.85
# Fraction of curved-loop drag velocity left after one second
drag_decay = 0.08

[gallery]
text = "Kinetic text in motion"
# Empty means every registered effect
active_effects = []
"""

try:
    DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)
except tomllib.TOMLDecodeError as e:
    logger.critical(f"Could not parse internal CONFIG_TOML_CONTENT: {e}")
    DEFAULT_CONFIG_FROM_TOML = {}


def get_config_path() -> Path:
    """The configuration file in use; ``KINETIC_TEXT_CONFIG`` overrides the default location."""
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


# --- Helper for deep merging dictionaries ---
def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


# --- Primary Configuration Loading Logic ---
_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def load_cli_config_and_ensure_existence(force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads settings from the configuration file.
    If the file doesn't exist, it's created with default values from CONFIG_TOML_CONTENT.
    Uses programmatic defaults (from CONFIG_TOML_CONTENT) as a base; never raises.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    config_path = get_config_path()
    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)

    if not config_path.exists():
        logger.info(f"Config file not found at {config_path}. Creating with default values.")
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(CONFIG_TOML_CONTENT)
            logger.info(f"Created default config file at {config_path}")
        except OSError as e:
            logger.error(f"Could not create default config file {config_path}: {e}. Using internal defaults.")
    else:
        logger.debug(f"Loading config from: {config_path}")
        try:
            with open(config_path, "rb") as f:
                user_config_from_file = tomllib.load(f)
            # Merge user's file settings on top of the programmatic defaults
            loaded_config = deep_merge_dicts(loaded_config, user_config_from_file)
            logger.debug(f"Loaded and merged config from {config_path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {config_path}: {e}. Using internal defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {config_path}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    return _CONFIG_CACHE


def save_setting_to_cli_config(section: str, key: str, value: Any) -> bool:
    """
    Saves a specific setting to the user's TOML configuration file.

    Reads the current file, updates ``key`` within ``section`` (dotted
    sections create nested tables), writes the whole file back and
    reloads the cache.

    Returns:
        True if the setting was saved successfully, False otherwise.
    """
    global _CONFIG_CACHE
    config_path = get_config_path()
    logger.info(f"Saving setting: [{section}].{key} = {value!r}")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create config directory {config_path.parent}: {e}")
        return False

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Corrupted config file at {config_path}. Cannot save. Please fix or delete it. Error: {e}")
            return False
        except OSError as e:
            logger.error(f"Could not read {config_path}: {e}")
            return False

    current_level = config_data
    try:
        for part in section.split('.'):
            current_level = current_level.setdefault(part, {})
        current_level[key] = value
    except (TypeError, AttributeError):
        # A part of the path is a value, not a table
        logger.error(f"Could not set '{key}' in section '{section}': a part of the path is not a table.")
        return False

    try:
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)
    except (OSError, TypeError) as e:
        logger.error(f"Failed to write updated config to {config_path}: {e}")
        return False

    logger.success(f"Saved setting to {config_path}")
    _CONFIG_CACHE = None
    load_cli_config_and_ensure_existence(force_reload=True)
    return True


# --- Setting Getters ---
def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_cli_config_and_ensure_existence()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def _get_typed_value(data_dict: Dict, key: str, default: Any, target_type: type = str) -> Any:
    """Helper to get value from dict and cast to type, with logging for type errors."""
    value = data_dict.get(key, default)
    if value is None:
        return default
    try:
        if target_type == bool:
            if isinstance(value, bool):
                return value
            return str(value).lower() in ['true', '1', 't', 'y', 'yes']
        return target_type(value)
    except (ValueError, TypeError) as e:
        logger.warning(f"Config key '{key}' has value '{value}' which could not be converted to {target_type.__name__}. Using default: '{default}'. Error: {e}")
        return default


@dataclass(frozen=True)
class MotionSettings:
    """The ``[motion]`` section, typed and range-checked."""
    reduce_motion: bool = False
    frame_interval: float = 0.033
    visible_threshold: float = 0.15
    velocity_retain: float = 0.85
    drag_decay: float = 0.08


def get_motion_settings() -> MotionSettings:
    """Read ``[motion]``; out-of-range values fall back to the defaults."""
    defaults = MotionSettings()
    section = load_cli_config_and_ensure_existence().get("motion") or {}
    if not isinstance(section, dict):
        logger.warning("Config section [motion] is not a table. Using defaults.")
        return defaults

    frame_interval = _get_typed_value(section, "frame_interval", defaults.frame_interval, float)
    if frame_interval <= 0:
        logger.warning(f"[motion] frame_interval must be positive, got {frame_interval}. Using {defaults.frame_interval}.")
        frame_interval = defaults.frame_interval

    visible_threshold = _get_typed_value(section, "visible_threshold", defaults.visible_threshold, float)
    visible_threshold = min(max(visible_threshold, 0.0), 1.0)

    velocity_retain = _get_typed_value(section, "velocity_retain", defaults.velocity_retain, float)
    if not 0.0 <= velocity_retain < 1.0:
        logger.warning(f"[motion] velocity_retain must be in [0, 1), got {velocity_retain}. Using {defaults.velocity_retain}.")
        velocity_retain = defaults.velocity_retain

    drag_decay = _get_typed_value(section, "drag_decay", defaults.drag_decay, float)
    if not 0.0 <= drag_decay <= 1.0:
        logger.warning(f"[motion] drag_decay must be in [0, 1], got {drag_decay}. Using {defaults.drag_decay}.")
        drag_decay = defaults.drag_decay

    return MotionSettings(
        reduce_motion=_get_typed_value(section, "reduce_motion", defaults.reduce_motion, bool),
        frame_interval=frame_interval,
        visible_threshold=visible_threshold,
        velocity_retain=velocity_retain,
        drag_decay=drag_decay,
    )


def get_log_file_path() -> Path:
    """Log file placed next to the configuration file."""
    default_name = DEFAULT_CONFIG_FROM_TOML.get("general", {}).get("log_filename", "kinetic_text.log")
    log_filename = get_cli_setting("general", "log_filename", default_name)
    log_file_path = get_config_path().parent / log_filename
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create log directory {log_file_path.parent}: {e}")
    return log_file_path

#
# End of config.py
#######################################################################################################################
