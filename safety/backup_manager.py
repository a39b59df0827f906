"""
backup_manager.py - Config backup and retention
ONE RESPONSIBILITY: Save copies of configs before overwrite, expire old ones
"""

import os
import shutil
import stat
import logging
from datetime import datetime

from core import constants

def backup_path_for(config_path, now=None):
    """Build the timestamped backup path for a config file."""
    now = now or datetime.now()
    timestamp = now.strftime(constants.BACKUP_TIMESTAMP_FORMAT)
    return f"{config_path}{constants.BACKUP_MARKER}{timestamp}"

def backup_config(config_path, now=None):
    """
    Save a byte-for-byte copy of a config before it is overwritten.

    Args:
        config_path: Config file to backup
        now: Timestamp for the backup name (defaults to current time)

    Returns:
        str: Path to backup file

    Raises:
        OSError: If the config could not be read or the copy written
    """
    backup_file = backup_path_for(config_path, now)
    shutil.copyfile(config_path, backup_file)
    logging.info(f"Backed up {config_path} to {backup_file}")
    return backup_file

def scan_backups(launch_dir):
    """
    Find config backups and their modification times.

    Each file is stat'ed once. Files that vanish or cannot be read while
    scanning are left out.

    Args:
        launch_dir: Directory holding the configs

    Returns:
        list: (path, mtime) tuples, newest first
    """
    try:
        items = os.listdir(launch_dir)
    except OSError as e:
        logging.debug(f"Could not list {launch_dir}: {e}")
        return []

    backups = []
    for filename in items:
        if not constants.is_backup_name(filename):
            continue

        full_path = os.path.join(launch_dir, filename)
        try:
            info = os.stat(full_path)
        except OSError:
            continue

        if stat.S_ISREG(info.st_mode):
            backups.append((full_path, info.st_mtime))

    return sorted(backups, key=lambda b: b[1], reverse=True)

def list_backups(launch_dir):
    """List config backup paths, newest first."""
    return [path for path, _ in scan_backups(launch_dir)]

def find_old_backups(launch_dir, retention_days=constants.BACKUP_RETENTION_DAYS, now=None):
    """Get backups last modified before the retention cutoff."""
    now = now if now is not None else datetime.now().timestamp()
    cutoff = now - retention_days * constants.SECONDS_PER_DAY

    return [path for path, mtime in scan_backups(launch_dir) if mtime < cutoff]
def cleanup_old_backups(launch_dir, retention_days=constants.BACKUP_RETENTION_DAYS, now=None):
    """
    Delete backups older than the retention window.

    Deletion is best-effort: files that cannot be removed are skipped.

    Args:
        launch_dir: Directory holding the configs
        retention_days: Age in days after which a backup is removed
        now: Reference time as epoch seconds (defaults to current time)

    Returns:
        list: Filenames of removed backups
    """
    removed = []

    for path in find_old_backups(launch_dir, retention_days, now):
        try:
            os.remove(path)
        except OSError as e:
            logging.debug(f"Could not remove old backup {path}: {e}")
            continue

        logging.info(f"Removed old backup {path}")
        removed.append(os.path.basename(path))

    return removed
