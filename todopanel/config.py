"""Per-user configuration storage for todopanel.

Stores the board preferences and settings snapshot in ``~/.todopanel``
(or ``$TODOPANEL_HOME`` when set).
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .domain.settings import TodoSettings

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "TODOPANEL_HOME"
SETTINGS_FILENAME = "settings.json"


def get_config_dir() -> Path:
    """Get the todopanel config directory."""
    override = os.environ.get(HOME_ENV_VAR)
    config_dir = Path(override) if override else Path.home() / ".todopanel"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_path() -> Path:
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> Optional[TodoSettings]:
    """Load the settings snapshot.

    Returns None when no settings file exists, so that callers use the
    built-in fallbacks. An unreadable file is logged and treated the same.
    """
    settings_file = get_settings_path()
    if not settings_file.exists():
        return None
    try:
        data = json.loads(settings_file.read_text(encoding="utf-8"))
        return TodoSettings(**data)
    except (json.JSONDecodeError, ValueError, TypeError, OSError) as e:
        logger.warning(f"Ignoring invalid settings file {settings_file}: {e}")
        return None


def save_settings(settings: TodoSettings) -> Path:
    """Save the settings snapshot and return the file written."""
    settings_file = get_settings_path()
    settings_file.write_text(
        json.dumps(settings.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
    return settings_file
