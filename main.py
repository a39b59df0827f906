#!/usr/bin/env python3
"""
main.py - Warp Launch Config Updater
Replaces a saved launch configuration with the latest temp draft
"""

import sys
import os
import argparse
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core import constants, config_manager
from core.config import Config, valid_retention_days
from detection import config_scanner
from safety import backup_manager
from operations import updater
from ui import display, prompts
from utils import logger

VERSION = "1.0.0"

def retention_days_arg(value):
    """argparse type for --retention-days."""
    try:
        return valid_retention_days(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def build_parser():
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(description=f"Warp Launch Config Updater v{VERSION}")
    parser.add_argument("--config-dir", type=str, help="Custom launch configuration directory")
    parser.add_argument("--dry-run", action="store_true", help="Show what would change without modifying files")
    parser.add_argument("--debug", action="store_true", help="Enable verbose logging")
    parser.add_argument("--retention-days", type=retention_days_arg, default=None,
                        help=f"Remove backups older than this many days (default {constants.BACKUP_RETENTION_DAYS})")
    parser.add_argument("--skip-backup-cleanup", action="store_true", help="Keep old backup files")
    parser.add_argument("--list", action="store_true", help="List configs and backups, then exit")
    parser.add_argument("--save-prefs", action="store_true",
                        help="Remember --config-dir and --retention-days for future runs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser

def list_configs(launch_dir, temp_prefix):
    """Show every config and backup in the launch directory."""
    configs = config_scanner.scan_configs(launch_dir, temp_prefix)
    rows = [
        [c['name'], "temp" if c['is_temp'] else "named", display.format_mtime(c['mtime'])]
        for c in configs
    ]

    print(f"Launch directory: {launch_dir}\n")
    display.print_table(["Name", "Type", "Modified"], rows)

    backups = backup_manager.list_backups(launch_dir)
    display.print_subheader(f"Backups ({len(backups)}):")
    for path in backups:
        print(f"  • {os.path.basename(path)}")

def cleanup_temp_files(temp_configs, dry_run=False):
    """Remove every temp draft and report each one."""
    display.print_subheader("🧹 Cleaning up temp files...")

    if dry_run:
        for config in temp_configs:
            display.print_info(f"Would remove {config['name']}")
        return

    removed = updater.cleanup_temp_files(temp_configs)
    for name in removed:
        display.print_item(f"Removed {name}")
    display.print_cleanup_summary(len(removed), "temp files")

def cleanup_old_backups(launch_dir, retention_days, dry_run=False):
    """Remove backups past the retention window and report each one."""
    display.print_subheader("🧹 Cleaning up old backup files...")

    if dry_run:
        for path in backup_manager.find_old_backups(launch_dir, retention_days):
            display.print_info(f"Would remove old backup: {os.path.basename(path)}")
        return

    removed = backup_manager.cleanup_old_backups(launch_dir, retention_days)
    for filename in removed:
        display.print_item(f"Removed old backup: {filename}")
    display.print_cleanup_summary(len(removed), "old backup files")

def run_update(config, prefs):
    """
    Apply the latest temp draft over a chosen named config.

    Args:
        config: Runtime options
        prefs: Saved user preferences

    Returns:
        int: 0 on success, 1 on any failure path
    """
    launch_dir = config.config_dir or config_scanner.get_launch_dir()
    temp_prefix = prefs.get("temp_prefix", constants.TEMP_PREFIX)
    logger.log_run_context(launch_dir, config, VERSION)

    # Step 1: Find the newest draft
    temp_configs = config_scanner.find_temp_configs(launch_dir, temp_prefix)
    if not temp_configs:
        display.print_error("No temp files found! Please save your current session as a temp config first.")
        print(f"   Use Cmd+P → 'Save New Launch Configuration' → name it '{temp_prefix}-something'")
        logging.error(f"No temp configs in {launch_dir}")
        return 1

    latest_temp = config_scanner.latest_config(temp_configs)
    display.print_success(f"Found temp config: {latest_temp['name']}")
    print()

    # Step 2: Choose the target
    named_configs = config_scanner.find_named_configs(launch_dir, temp_prefix)
    if not named_configs:
        display.print_error("No existing launch configurations found!")
        logging.error(f"No named configs in {launch_dir}")
        return 1

    print("Available launch configurations:")
    choice = prompts.prompt_selection(
        "Enter the number of the config to UPDATE:",
        [c['name'] for c in named_configs]
    )

    if choice is None:
        display.print_error("Invalid selection!")
        logging.warning("Invalid selection, nothing changed")
        return 1

    target = named_configs[choice]
    print(f"Updating: {target['name']}")
    logging.info(f"Updating {target['name']} from {latest_temp['name']}")

    if config.dry_run:
        display.print_info(f"Would back up to: {os.path.basename(backup_manager.backup_path_for(target['path']))}")
        display.print_info(f"Would replace '{target['name']}' with '{latest_temp['name']}'")
        cleanup_temp_files(temp_configs, dry_run=True)
        if not config.skip_backup_cleanup:
            cleanup_old_backups(launch_dir, config.retention_days, dry_run=True)
        return 0

    # Step 3: Backup, then overwrite
    try:
        backup_file = backup_manager.backup_config(target['path'])
    except OSError as e:
        display.print_error(f"Failed to backup: {e}")
        logging.error(f"Backup of {target['path']} failed: {e}")
        return 1
    display.print_success(f"Backed up to: {os.path.basename(backup_file)}")

    try:
        updater.update_config(latest_temp['path'], target['path'], target['name'])
    except OSError as e:
        display.print_error(f"Failed to update config: {e}")
        logging.error(f"Update of {target['path']} failed: {e}")
        return 1
    display.print_done(f"Successfully updated '{target['name']}'!")

    # Step 4: Cleanup
    cleanup_temp_files(temp_configs)

    if not config.skip_backup_cleanup:
        cleanup_old_backups(launch_dir, config.retention_days)

    return 0

def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logger.setup_logging(verbose=args.debug)
    if args.debug:
        display.print_info(f"Logging to {logger.get_log_file()}")

    prefs = config_manager.load_config()
    config = Config.from_args(args, prefs)

    if args.save_prefs:
        if args.config_dir:
            prefs["config_dir"] = args.config_dir
        if args.retention_days is not None:
            prefs["retention_days"] = args.retention_days
        if config_manager.save_config(prefs):
            display.print_success(f"Preferences saved to {config_manager.CONFIG_FILE}")

    if args.list:
        launch_dir = config.config_dir or config_scanner.get_launch_dir()
        list_configs(launch_dir, prefs.get("temp_prefix", constants.TEMP_PREFIX))
        return 0

    display.print_header("🚀 Warp Launch Config Updater")

    if config.dry_run:
        display.print_warning("DRY RUN MODE - No changes will be made")
        print()

    return run_update(config, prefs)

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        sys.exit(0)
    except Exception as e:
        display.print_error(f"Fatal error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
