"""
Color utilities for terminal notifications.
"""

import logging
import sys
from typing import Optional, TextIO

PREFIX = "[dotnet-test]"


class Colors:
    """ANSI color codes for terminal output."""
    
    CYAN = '\033[96m'
    DIM = '\033[2m'
    BRIGHT_RED = '\033[1;91m'
    BRIGHT_YELLOW = '\033[1;93m'
    
    # Reset
    RESET = '\033[0m'


LEVEL_COLORS = {
    logging.DEBUG: Colors.DIM,
    logging.INFO: Colors.CYAN,
    logging.WARNING: Colors.BRIGHT_YELLOW,
    logging.ERROR: Colors.BRIGHT_RED,
}


def colorize(text: str, color: str) -> str:
    """Apply color to text."""
    return f"{color}{text}{Colors.RESET}"


def format_notification(message: str, level: int, use_color: bool = True) -> str:
    """Prefix a user notice with the tool name and color it by level."""
    text = f"{PREFIX} {message}"
    if not use_color:
        return text
    return colorize(text, LEVEL_COLORS.get(level, Colors.BRIGHT_RED))


def notify(message: str, level: int, threshold: int, stream: Optional[TextIO] = None) -> bool:
    """
    Show a notice to the user unless it is below the configured level.

    Args:
        message: Text to show
        level: ``logging`` level of the notice
        threshold: Configured minimum level
        stream: Output stream (defaults to stderr)

    Returns:
        True if the notice was written
    """
    if level < threshold:
        return False
    stream = stream or sys.stderr
    use_color = hasattr(stream, "isatty") and stream.isatty()
    print(format_notification(message, level, use_color), file=stream)
    return True
