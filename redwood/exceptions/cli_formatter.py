"""
CLI Formatter
Terminal formatting utilities with colors and boxes for error reports
"""
import os
import sys
import traceback
from typing import List

# ============================================================================
# ANSI COLORS
# ============================================================================

class CliColors:
    """ANSI color codes for terminal output"""
    RESET = '\033[0m'

    BOLD = '\033[1m'
    DIM = '\033[2m'

    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    WHITE = '\033[97m'


class CliBox:
    """Unicode box-drawing characters (rounded corners)"""
    H = '─'
    V = '│'
    TL = '╭'
    TR = '╮'
    BL = '╰'
    BR = '╯'
    L = '├'
    R = '┤'


def _is_color_supported(stream=None) -> bool:
    """Check if terminal supports colors"""
    stream = stream or sys.stdout
    return (
        hasattr(stream, 'isatty') and stream.isatty() and
        os.getenv('TERM') != 'dumb' and
        'NO_COLOR' not in os.environ
    )


def _colorize(text: str, color: str) -> str:
    """Apply color to text if supported"""
    if _is_color_supported():
        return f"{color}{text}{CliColors.RESET}"
    return text


def _box_top(width: int, color: str) -> str:
    return _colorize(CliBox.TL + CliBox.H * (width - 2) + CliBox.TR, color)


def _box_divider(width: int, color: str) -> str:
    return _colorize(CliBox.L + CliBox.H * (width - 2) + CliBox.R, color)


def _box_bottom(width: int, color: str) -> str:
    return _colorize(CliBox.BL + CliBox.H * (width - 2) + CliBox.BR, color)


def _box_line(text: str, width: int = 70) -> str:
    """Create a left-aligned text line in a box"""
    padding = max(width - len(text) - 4, 0)
    return f"{CliBox.V} {text}{' ' * padding} {CliBox.V}"


def _wrap(text: str, width: int = 60) -> List[str]:
    """Wrap long messages on word boundaries"""
    lines = []
    current_line = ""
    for word in text.split():
        if current_line and len(current_line) + len(word) + 1 > width:
            lines.append(current_line)
            current_line = word
        else:
            current_line = f"{current_line} {word}" if current_line else word
    if current_line:
        lines.append(current_line)
    return lines or [""]


def _format_traceback(error: BaseException) -> List[str]:
    """Format traceback with highlighting"""
    tb_lines = ''.join(
        traceback.format_exception(type(error), error, error.__traceback__)
    ).split('\n')
    formatted = []

    for line in tb_lines:
        if not line.strip():
            continue

        # File paths in cyan
        if 'File "' in line:
            formatted.append(_colorize(line, CliColors.CYAN))
        # Final exception line in red
        elif not line.startswith(' ') and ':' in line:
            formatted.append(_colorize(line, CliColors.BOLD + CliColors.RED))
        else:
            formatted.append(_colorize(f"  {line}", CliColors.WHITE))

    return formatted
