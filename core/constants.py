"""
constants.py - Launch configuration naming rules
ONE RESPONSIBILITY: Store fixed names and limits
"""

# Launch configurations live under the user's home directory
LAUNCH_SUBDIR = (".warp", "launch_configurations")

# File naming
CONFIG_EXTENSION = ".yaml"
TEMP_PREFIX = "temp"
BACKUP_MARKER = ".backup."
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# Key rewritten when a draft replaces a named config
NAME_KEY = "name:"

# Backups older than this are removed after an update
BACKUP_RETENTION_DAYS = 7

SECONDS_PER_DAY = 24 * 60 * 60


def config_name(filename):
    """Strip the config extension from a filename."""
    if filename.endswith(CONFIG_EXTENSION):
        return filename[:-len(CONFIG_EXTENSION)]
    return filename


def is_temp_name(filename, temp_prefix=TEMP_PREFIX):
    """Check if filename marks a draft (temp) config."""
    return filename.startswith(temp_prefix)


def is_backup_name(filename):
    """Check if filename is a config backup."""
    return BACKUP_MARKER in filename
