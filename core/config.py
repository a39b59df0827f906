"""
config.py - Runtime options for a single run
"""

import logging

from core import constants

def valid_retention_days(value):
    """
    Check a backup retention window.

    A window under one day would expire the backup made by the same run.

    Returns:
        int: The window in days

    Raises:
        ValueError: If the value is not an integer of at least 1
    """
    if isinstance(value, bool):
        raise ValueError(f"retention days must be an integer, got {value!r}")
    days = int(value)
    if days < 1:
        raise ValueError(f"retention days must be at least 1, got {days}")
    return days

class Config:
    def __init__(self):
        self.dry_run = False
        self.debug = False
        self.config_dir = None
        self.retention_days = constants.BACKUP_RETENTION_DAYS
        self.skip_backup_cleanup = False

    @classmethod
    def from_args(cls, args, prefs=None):
        """Build runtime options from parsed CLI args, falling back to saved prefs."""
        prefs = prefs or {}
        config = cls()
        config.dry_run = args.dry_run
        config.debug = args.debug
        config.config_dir = args.config_dir or prefs.get("config_dir")
        config.skip_backup_cleanup = args.skip_backup_cleanup

        if args.retention_days is not None:
            config.retention_days = valid_retention_days(args.retention_days)
            return config

        saved = prefs.get("retention_days", constants.BACKUP_RETENTION_DAYS)
        try:
            config.retention_days = valid_retention_days(saved)
        except (TypeError, ValueError) as e:
            logging.warning(f"Ignoring saved retention_days: {e}")
        return config
