"""Configuration for frpconf"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .platform_utils import default_data_dir

load_dotenv()


class Config:
    """Environment-driven settings"""

    # Private storage root; each config type gets a subdirectory
    STORAGE_ROOT = Path(
        os.getenv("FRPCONF_STORAGE_ROOT", "") or default_data_dir() / "frpconf"
    ).expanduser()

    # Provider URI authority: content://<AUTHORITY>/<type>/<name>
    AUTHORITY = os.getenv("FRPCONF_AUTHORITY", "frpconf.config")

    # Persisted toggles (allow_config_read / allow_config_write)
    PREFS_FILE = Path(
        os.getenv("FRPCONF_PREFS_FILE", "") or STORAGE_ROOT / "shared_prefs" / "data.json"
    ).expanduser()

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


config = Config()
