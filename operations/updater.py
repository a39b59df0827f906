"""
updater.py - Apply a draft config over a named one
ONE RESPONSIBILITY: Rewrite target configs and clear drafts
"""

import os
import logging

from core import constants

def rewrite_name(content, target_name):
    """
    Replace the first 'name:' line so the config keeps the target's name.

    Only the first line starting with the key is replaced. Every other line
    and a missing final newline are kept as is.

    Args:
        content: Draft config text
        target_name: Name of the config being overwritten

    Returns:
        str: Rewritten config text
    """
    lines = content.split("\n")

    for i, line in enumerate(lines):
        if line.startswith(constants.NAME_KEY):
            lines[i] = f"{constants.NAME_KEY} {target_name}"
            break

    return "\n".join(lines)

def update_config(source_path, target_path, target_name):
    """
    Overwrite a named config with a draft's content.

    Bytes that are not valid UTF-8 pass through unchanged.

    Args:
        source_path: Draft (temp) config to copy from
        target_path: Named config to overwrite
        target_name: Name to keep in the target

    Raises:
        OSError: If the draft could not be read or the target written
    """
    with open(source_path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
        content = f.read()

    new_content = rewrite_name(content, target_name)

    with open(target_path, 'w', encoding='utf-8', errors='surrogateescape', newline='') as f:
        f.write(new_content)

    logging.info(f"Updated {target_path} from {source_path}")

def cleanup_temp_files(temp_configs):
    """
    Delete draft configs after a successful update.

    Args:
        temp_configs: Config records to delete

    Returns:
        list: Names of removed configs
    """
    removed = []

    for config in temp_configs:
        try:
            os.remove(config['path'])
        except OSError as e:
            logging.debug(f"Could not remove temp config {config['path']}: {e}")
            continue

        logging.info(f"Removed temp config {config['path']}")
        removed.append(config['name'])

    return removed
