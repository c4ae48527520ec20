"""
Base Command Class
Command base class for the Redwood CLI
"""
from abc import ABC, abstractmethod
from typing import Optional


class Command(ABC):

    # Command name (e.g., "render", "make:view")
    name: str = ""

    # Command description
    description: str = ""

    # Command signature (for help display)
    signature: Optional[str] = None

    def __init__(self):
        if not self.signature:
            self.signature = self.name

    @abstractmethod
    async def handle(self, *args, **kwargs):
        """
        Execute the command logic

        Returns:
            int: Exit code (0 for success, non-zero for error)
        """
        pass

    def engine(self, config: Optional[str] = None):
        """
        Build the project's ViewEngine and configure logging from its config

        Args:
            config: Explicit config file (searched for upwards from cwd when omitted)
        """
        from redwood.logging import LoggerConfig
        from redwood.support import Config
        from redwood.view import ViewEngine

        engine = ViewEngine.from_config(config)

        file_name = None
        if Config.has('logging.file'):
            file_name = Config.base_path(Config.get('logging.file'))
        LoggerConfig.setup_logger('redwood', file_name=file_name)
        return engine

    # Output helpers
    def info(self, message: str):
        """Print info message"""
        print(f"ℹ {message}")

    def success(self, message: str):
        """Print success message"""
        print(f"✅ {message}")

    def error(self, message: str):
        """Print error message"""
        print(f"❌ {message}")

    def warning(self, message: str):
        """Print warning message"""
        print(f"⚠ {message}")

    def line(self, message: str = ""):
        """Print plain line"""
        print(message)

    def table(self, headers: list, rows: list):
        """Print a simple table"""
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(str(cell)))

        header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
        self.line(header_line)
        self.line("-" * len(header_line))

        for row in rows:
            row_line = " | ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row))
            self.line(row_line)
