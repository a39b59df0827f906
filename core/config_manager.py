"""
config_manager.py - Manage persistent user preferences
ONE RESPONSIBILITY: Load and save user settings to a JSON file
"""

import json
import os

from core import constants

CONFIG_FILE = os.path.expanduser("~/.warp_config_updater_prefs.json")

DEFAULT_CONFIG = {
    "config_dir": None,  # None means ~/.warp/launch_configurations
    "temp_prefix": constants.TEMP_PREFIX,
    "retention_days": constants.BACKUP_RETENTION_DAYS
}

def load_config(config_file=None):
    """Load configuration from file, falling back to defaults."""
    config_file = config_file or CONFIG_FILE

    if not os.path.exists(config_file):
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file, 'r') as f:
            user_config = json.load(f)
            # Merge with defaults to ensure all keys exist
            config = DEFAULT_CONFIG.copy()
            config.update(user_config)
            return config
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        return DEFAULT_CONFIG.copy()

def save_config(config, config_file=None):
    """Save configuration to file."""
    config_file = config_file or CONFIG_FILE

    try:
        with open(config_file, 'w') as f:
            json.dump(config, f, indent=4)
        return True
    except (OSError, TypeError) as e:
        print(f"Error saving config: {e}")
        return False
