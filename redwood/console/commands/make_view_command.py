"""
Make View Command
Writes a page template and a matching context module
"""
from redwood.console.command import Command
from redwood.view import ComponentKind

PAGE_STUB = """<h1>{{ title }}</h1>
"""

CONTEXT_STUB = '''from redwood.view import Context


class {class_name}(Context):
    def __init__(self):
        self.title = {title!r}
'''


class MakeViewCommand(Command):
    """Create the files for a new view"""

    name = "make:view"
    description = "Create a page template and its context class"
    signature = "make:view <name> [--namespace=] [--force]"

    async def handle(self, *args, namespace: str = None, force: bool = False,
                     config: str = None, **kwargs):
        if not args:
            self.error("Please name the view: redwood make:view <name>")
            return 1

        engine = self.engine(config)
        view = args[0]
        namespace = str(namespace) if namespace else ''

        page_path = engine.resolver.resolve(ComponentKind.PAGE, view, namespace)
        context_path = engine.resolver.resolve(ComponentKind.CONTEXT, view, namespace)
        class_name = engine.resolver.type_name(ComponentKind.CONTEXT, view, namespace)

        existing = [path for path in (page_path, context_path) if path.exists()]
        if existing and not force:
            for path in existing:
                self.error(f"{path} already exists")
            self.line("Use --force to overwrite")
            return 1

        page_path.parent.mkdir(parents=True, exist_ok=True)
        context_path.parent.mkdir(parents=True, exist_ok=True)
        page_path.write_text(PAGE_STUB, encoding='utf-8')
        context_path.write_text(
            CONTEXT_STUB.format(class_name=class_name, title=view.strip().title()),
            encoding='utf-8'
        )

        self.success(f"Created {page_path.relative_to(engine.root)}")
        self.success(f"Created {context_path.relative_to(engine.root)} ({class_name})")
        return 0
