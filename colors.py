"""ANSI color codes for the completion summary.

Colors optimized for dark terminal backgrounds.
"""

from enum import StrEnum


class Color(StrEnum):
    """Colors used in the summary."""

    GREEN = "\033[92m"  # Step done
    YELLOW = "\033[93m"  # Step skipped
    RED = "\033[91m"  # Step failed
    CYAN = "\033[96m"  # Headings
    BOLD = "\033[1m"
    RESET = "\033[0m"
