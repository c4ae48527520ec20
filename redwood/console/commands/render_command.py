"""
Render Command
Renders a single page or partial to stdout or a file
"""
from pathlib import Path

from redwood.console.command import Command


class RenderCommand(Command):
    """Render one view"""

    name = "render"
    description = "Render a page (or partial) and print the HTML"
    signature = "render <view> [--partial] [--layout=] [--namespace=] [--output=]"

    async def handle(self, *args, partial: bool = False, layout: str = None,
                     namespace: str = None, output: str = None, config: str = None, **kwargs):
        if not args:
            self.error("Please name the view to render: redwood render <view>")
            return 1

        engine = self.engine(config)

        options = {'namespace': str(namespace) if namespace else None}
        if partial:
            options['partial'] = args[0]
        else:
            options['page'] = args[0]
            options['layout'] = str(layout) if layout else None

        html = engine.render(options)

        if output:
            target = Path(output)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding='utf-8')
            self.success(f"Wrote {target}")
        else:
            print(html, end='')
        return 0
