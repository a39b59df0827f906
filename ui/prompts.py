"""
prompts.py - User interaction prompts
ONE RESPONSIBILITY: Get user input safely
"""

import re

from ui.display import Colors

SELECTION_PATTERN = re.compile(r"[+-]?[0-9]+")

def parse_selection(response, option_count):
    """
    Convert a 1-based menu answer to a 0-based index.

    Returns:
        int: Selected index, or None if the answer is not a valid choice
    """
    response = response.strip()
    if not SELECTION_PATTERN.fullmatch(response):
        return None

    choice = int(response)

    if 1 <= choice <= option_count:
        return choice - 1
    return None

def prompt_selection(question, options):
    """
    Present a numbered menu and read a single answer.

    There is no retry: one invalid answer ends the selection.

    Args:
        question: Prompt shown after the menu
        options: List of option strings

    Returns:
        int: Selected option index (0-based), or None if invalid or cancelled
    """
    for i, option in enumerate(options, 1):
        print(f"  {i}) {option}")
    print()

    try:
        response = input(f"{Colors.BOLD}{question}{Colors.END} ")
    except (KeyboardInterrupt, EOFError):
        print()
        return None

    return parse_selection(response, len(options))
