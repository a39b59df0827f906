"""
display.py - Terminal display utilities
ONE RESPONSIBILITY: Formatted console output
"""

import sys
from datetime import datetime

# ANSI color codes
class Colors:
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    BOLD = '\033[1m'
    END = '\033[0m'

# Disable colors if not in TTY
if not sys.stdout.isatty():
    for attr in dir(Colors):
        if not attr.startswith('_'):
            setattr(Colors, attr, '')

def print_header(text):
    """Print tool banner with underline."""
    print(f"{Colors.BOLD}{Colors.CYAN}{text}{Colors.END}")
    print(f"{Colors.BLUE}{'=' * len(text)}{Colors.END}\n")

def print_subheader(text):
    """Print styled section title."""
    print(f"\n{Colors.BOLD}{text}{Colors.END}")

def print_success(text):
    """Print success message."""
    print(f"{Colors.GREEN}✓ {text}{Colors.END}")

def print_done(text):
    """Print completion message."""
    print(f"{Colors.GREEN}{Colors.BOLD}✅ {text}{Colors.END}")

def print_error(text):
    """Print error message."""
    print(f"{Colors.RED}❌ {text}{Colors.END}")

def print_warning(text):
    """Print warning message."""
    print(f"{Colors.YELLOW}⚠  {text}{Colors.END}")

def print_info(text):
    """Print info message."""
    print(f"{Colors.CYAN}ℹ  {text}{Colors.END}")

def print_item(text):
    """Print indented result line."""
    print(f"  {Colors.GREEN}✓{Colors.END} {text}")

def print_cleanup_summary(count, what):
    """Print result of a cleanup pass."""
    if count == 0:
        print(f"  No {what} to clean up")
    else:
        print(f"  🎉 Cleaned up {count} {what.rstrip('s')}(s)")

def print_table(headers, rows, col_widths=None):
    """
    Print formatted table.

    Args:
        headers: List of column headers
        rows: List of row data (each row is a list)
        col_widths: Optional list of column widths
    """
    if not rows:
        print("  (No data)")
        return

    # Auto-calculate widths if not provided
    if col_widths is None:
        col_widths = [len(str(h)) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(col_widths):
                    col_widths[i] = max(col_widths[i], len(str(cell)))

    header_parts = [str(h).ljust(col_widths[i]) for i, h in enumerate(headers)]
    print("  " + " │ ".join(header_parts))

    print("  " + "─┼─".join("─" * width for width in col_widths))

    for row in rows:
        row_parts = [str(cell).ljust(col_widths[i]) for i, cell in enumerate(row)]
        print("  " + " │ ".join(row_parts))

def format_mtime(timestamp):
    """Format epoch seconds as a local date/time string."""
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")
