"""
config_scanner.py - Scan the launch directory for configs
ONE RESPONSIBILITY: Find and classify .yaml launch configurations
"""

import os
import logging

from typing import List, Dict, Optional, Any

from core import constants

def get_launch_dir() -> str:
    """
    Resolve the launch configuration directory.

    Uses the current user's home from the password database, falling back
    to HOME (or USERPROFILE on Windows) if the user entry is unavailable.

    Returns:
        str: Path to ~/.warp/launch_configurations
    """
    try:
        import pwd
        home_dir = pwd.getpwuid(os.getuid()).pw_dir
    except (ImportError, KeyError):
        home_dir = os.environ.get("HOME") or os.environ.get("USERPROFILE", "")

    return os.path.join(home_dir, *constants.LAUNCH_SUBDIR)

def scan_configs(launch_dir: str, temp_prefix: str = constants.TEMP_PREFIX) -> List[Dict[str, Any]]:
    """
    Scan directory for launch configurations.

    Args:
        launch_dir: Directory to scan
        temp_prefix: Filename prefix marking draft configs

    Returns:
        list: Config records {'name', 'path', 'mtime', 'is_temp'}, sorted by filename.
              Empty if the directory is missing or unreadable.
    """
    if not os.path.isdir(launch_dir):
        logging.debug(f"Launch directory not found: {launch_dir}")
        return []

    try:
        items = os.listdir(launch_dir)
    except OSError as e:
        logging.warning(f"Could not list {launch_dir}: {e}")
        return []

    configs = []
    for item in items:
        if not item.endswith(constants.CONFIG_EXTENSION) or item.startswith("."):
            continue

        full_path = os.path.join(launch_dir, item)

        # Skip directories named like configs
        if not os.path.isfile(full_path):
            continue

        try:
            mtime = os.path.getmtime(full_path)
        except OSError:
            continue

        configs.append({
            'name': constants.config_name(item),
            'path': full_path,
            'mtime': mtime,
            'is_temp': constants.is_temp_name(item, temp_prefix)
        })

    return sorted(configs, key=lambda c: os.path.basename(c['path']))

def find_temp_configs(launch_dir: str, temp_prefix: str = constants.TEMP_PREFIX) -> List[Dict[str, Any]]:
    """Get draft (temp) configs only."""
    return [c for c in scan_configs(launch_dir, temp_prefix) if c['is_temp']]

def find_named_configs(launch_dir: str, temp_prefix: str = constants.TEMP_PREFIX) -> List[Dict[str, Any]]:
    """Get named (update target) configs only."""
    return [c for c in scan_configs(launch_dir, temp_prefix) if not c['is_temp']]

def latest_config(configs: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Get the most recently modified config, or None."""
    if not configs:
        return None
    return max(configs, key=lambda c: c['mtime'])
