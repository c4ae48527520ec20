"""
View List Command
Lists the project's pages and whether each has a context
"""
from redwood.console.command import Command
from redwood.view import ComponentKind


class ViewListCommand(Command):
    """Show pages and their contexts"""

    name = "view:list"
    description = "List pages with their context files"
    signature = "view:list"

    async def handle(self, *args, config: str = None, **kwargs):
        engine = self.engine(config)

        rows = []
        for page, view, namespace in engine.views():
            context_path = engine.resolver.resolve(ComponentKind.CONTEXT, view, namespace)
            if engine.contexts.get(view, namespace) is not None:
                status = 'registered'
            elif context_path.is_file():
                status = engine.resolver.type_name(ComponentKind.CONTEXT, view, namespace)
            else:
                status = 'missing'
            rows.append([page, namespace or '-', context_path.relative_to(engine.root), status])

        if not rows:
            self.info("No pages found")
            return 0

        self.table(['Page', 'Namespace', 'Context file', 'Context'], rows)
        return 0
