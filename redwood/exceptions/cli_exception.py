import os
import sys
from redwood.exceptions.custom import RedwoodException
from redwood.exceptions.cli_formatter import (
    CliColors, _colorize, _box_line, _box_top, _box_divider, _box_bottom, _wrap, _format_traceback
)


def handle_cli_exceptions(error: BaseException, stream=None) -> int:
    """
    Print a formatted report for an error raised by a CLI command
    Shows the view details and a hint for Redwood errors

    Returns:
        int: Exit code (always 1)
    """
    stream = stream or sys.stderr
    is_dev = os.getenv('APP_ENV', 'local') in ['local', 'development']
    width = 70

    def out(line: str = ""):
        print(line, file=stream)

    out()
    out(_box_top(width, CliColors.RED))
    out(_box_line(_colorize(f"❌ {type(error).__name__}", CliColors.BOLD + CliColors.RED), width))
    out(_box_divider(width, CliColors.RED))

    message = error.message if isinstance(error, RedwoodException) else str(error)
    for line in _wrap(message):
        out(_box_line(_colorize(line, CliColors.WHITE), width))

    if isinstance(error, RedwoodException):
        if error.context:
            out(_box_line("", width))
            for key, value in error.context.items():
                for line in _wrap(f"{key}: {value}"):
                    out(_box_line(_colorize(line, CliColors.YELLOW), width))
        if error.hint:
            out(_box_line("", width))
            for line in _wrap(error.hint):
                out(_box_line(_colorize(line, CliColors.GREEN), width))

    out(_box_bottom(width, CliColors.RED))

    # Show traceback in dev mode
    if is_dev:
        out()
        out(_box_top(width, CliColors.BLUE))
        out(_box_line(_colorize("📋 FULL TRACEBACK (APP_ENV=local)", CliColors.BOLD + CliColors.BLUE), width))
        out(_box_bottom(width, CliColors.BLUE))
        out()
        for line in _format_traceback(error):
            out(line)
    else:
        out()
        out(_box_top(width, CliColors.CYAN))
        out(_box_line(_colorize("💡 Tip: Set APP_ENV=local for full traceback", CliColors.CYAN), width))
        out(_box_bottom(width, CliColors.CYAN))
    out()
    return 1


def install_cli_error_handler():
    """
    Install the formatted exception handler for uncaught CLI errors
    """
    original_excepthook = sys.excepthook

    def cli_exception_hook(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            original_excepthook(exc_type, exc_value, exc_traceback)
            return
        handle_cli_exceptions(exc_value)

    sys.excepthook = cli_exception_hook
