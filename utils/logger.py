"""
logger.py - Per-run log file
ONE RESPONSIBILITY: Record what each update run did
"""

import glob
import logging
import os
import tempfile
from datetime import datetime

LOG_DIR = os.path.join(tempfile.gettempdir(), "warp_config_updater_logs")
LOG_PREFIX = "updater_"
MAX_LOG_FILES = 20

LOG_FILE = None

def prune_old_logs(log_dir, keep=MAX_LOG_FILES):
    """
    Delete the oldest run logs so at most `keep` remain.

    Returns:
        list: Paths of removed log files
    """
    logs = sorted(glob.glob(os.path.join(log_dir, f"{LOG_PREFIX}*.log")))
    stale = logs[:-keep] if keep > 0 else logs

    removed = []
    for path in stale:
        try:
            os.remove(path)
        except OSError:
            continue
        removed.append(path)
    return removed

def setup_logging(verbose=False, log_dir=None):
    """
    Start a new run log.

    One file per run, named after the start time. Older runs beyond
    MAX_LOG_FILES are pruned first. With verbose, records also go to stderr.

    Returns:
        str: Path to the new log file
    """
    global LOG_FILE

    log_dir = log_dir or LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    pruned = prune_old_logs(log_dir, keep=MAX_LOG_FILES - 1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    LOG_FILE = os.path.join(log_dir, f"{LOG_PREFIX}{timestamp}.log")

    handlers = [logging.FileHandler(LOG_FILE, encoding='utf-8')]
    if verbose:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

    if pruned:
        logging.debug(f"Pruned {len(pruned)} old run log(s)")
    return LOG_FILE

def log_run_context(launch_dir, config, version):
    """Write the run's settings at the top of the log."""
    logging.info(f"Warp Launch Config Updater v{version}")
    logging.info(f"Launch directory: {launch_dir}")
    logging.info(
        f"Options: dry_run={config.dry_run} retention_days={config.retention_days} "
        f"skip_backup_cleanup={config.skip_backup_cleanup}"
    )

def get_log_file():
    """Get current log file path."""
    return LOG_FILE
