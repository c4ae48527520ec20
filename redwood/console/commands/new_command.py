"""
New Project Command
Creates a project outline: config file, .env and view component folders
"""
from redwood.console.command import Command
from redwood.support import init_project


class NewCommand(Command):
    """Scaffold a new Redwood project"""

    name = "new"
    description = "Create a new project directory"
    signature = "new <name> [--bare]"

    async def handle(self, *args, bare: bool = False, **kwargs):
        if not args:
            self.error("Please give the project a name: redwood new <name>")
            return 1

        root = init_project(args[0], with_welcome=not bare)

        self.success(f"Created project in {root}")
        self.line()
        self.line("Next steps:")
        self.line(f"  1. cd {args[0]}")
        self.line("  2. redwood build")
        self.line()
        return 0
