import inspect
from pathlib import Path

from redwood.console.command import Command
from redwood.exceptions import handle_cli_exceptions
from redwood.logging import getLogger
from redwood.support import ClassLoader

logger = getLogger(__name__)


class Console:
    # Paths to scan for commands
    COMMAND_PATHS = [
        Path(__file__).parent / 'commands',  # Built-in commands
    ]

    def __init__(self, command_paths=None):
        self.commands = {}
        self.command_files = {}  # Map command names to file paths
        self.command_paths = list(command_paths or self.COMMAND_PATHS)
        self._discover_commands()

    def _discover_commands(self):
        """Auto-discover commands"""
        for command_path in self.command_paths:
            command_path = Path(command_path)
            if not command_path.exists():
                continue

            for py_file in sorted(command_path.glob('*.py')):
                # Skip __init__.py
                if py_file.name.startswith('__'):
                    continue

                try:
                    module = ClassLoader.load_file(py_file, module_name=f"redwood_commands.{py_file.stem}")
                except Exception as e:
                    logger.warning("Skipping command file %s: %s", py_file, e)
                    continue

                # Find all Command subclasses in the module
                for obj in ClassLoader.classes(module).values():
                    if (issubclass(obj, Command) and
                            obj is not Command and
                            not inspect.isabstract(obj) and
                            obj.name):
                        command_instance = obj()
                        self.commands[command_instance.name] = command_instance
                        self.command_files[command_instance.name] = str(py_file)

    def show_help(self):
        """Show available commands"""
        print("Redwood - convention-over-configuration HTML rendering")
        print()

        if not self.commands:
            print("No commands available.")
            return

        # Group commands by category
        categories = {}
        for name, cmd in self.commands.items():
            # Extract category from command name (e.g., "make:view" -> "make")
            category = name.split(':')[0] if ':' in name else 'general'
            categories.setdefault(category, []).append((name, cmd))

        for category in sorted(categories.keys()):
            print(f"{category.upper()}:")
            for name, cmd in sorted(categories[category]):
                print(f"  {cmd.signature:<45} {cmd.description}")
            print()

        print("Global options: --config=<path to .redwood.yaml>")
        print("Run 'redwood help <command>' for detailed information")

    async def run(self, argv):
        """Run the CLI application"""
        if len(argv) < 2:
            self.show_help()
            return 0

        command_name = argv[1]

        if command_name in ['help', '--help', '-h']:
            if len(argv) > 2:
                cmd_name = argv[2]
                if cmd_name in self.commands:
                    cmd = self.commands[cmd_name]
                    print(f"\nCommand: {cmd.name}")
                    print(f"Description: {cmd.description}")
                    print(f"Signature: {cmd.signature}")
                    return 0
                else:
                    print(f"Unknown command: {cmd_name}\n")
                    self.show_help()
                    return 1
            else:
                self.show_help()
                return 0

        if command_name not in self.commands:
            print(f"❌ Unknown command: {command_name}\n")
            self.show_help()
            return 1

        command = self.commands[command_name]
        args, kwargs = self._parse_args(argv[2:])

        try:
            exit_code = await command.handle(*args, **kwargs)
            return exit_code if exit_code is not None else 0

        except KeyboardInterrupt:
            print("\n\n⚠ Command interrupted by user")
            return 130
        except Exception as e:
            return handle_cli_exceptions(e)

    def _parse_args(self, argv):
        """
        Parse command line arguments
        Returns tuple of (positional_args, keyword_args)
        """
        args = []
        kwargs = {}

        for arg in argv:
            if arg.startswith('--'):
                # Long option (--verbose, --name=value)
                if '=' in arg:
                    key, value = arg[2:].split('=', 1)
                    if value.lower() in ('true', 'false'):
                        kwargs[key] = value.lower() == 'true'
                    else:
                        kwargs[key] = value
                else:
                    # Boolean flag
                    kwargs[arg[2:]] = True
            elif arg.startswith('-') and len(arg) > 1:
                # Short option
                kwargs[arg[1:]] = True
            else:
                args.append(arg)

        return args, kwargs
