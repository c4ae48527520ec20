"""
Build Command
Renders every page of the project into the output folder
"""
import time
from pathlib import Path

from redwood.console.command import Command
from redwood.defaults import DEFAULT_OUTPUT_DIR
from redwood.support import Config


class BuildCommand(Command):
    """Render all pages"""

    name = "build"
    description = "Render every page into the output folder"
    signature = "build [--output=]"

    async def handle(self, *args, output: str = None, config: str = None, **kwargs):
        engine = self.engine(config)

        if output:
            target_dir = Path(output)
        else:
            target_dir = Config.base_path(Config.get('view.output', DEFAULT_OUTPUT_DIR))

        views = engine.views()
        if not views:
            self.warning(f"No pages found in {engine.registry.descriptor('page').directory}")
            return 0

        started = time.perf_counter()
        rendered = []
        for page, view, namespace in views:
            rendered.append((page, engine.render(view, namespace=namespace)))

        # Write only once every page rendered
        target_dir.mkdir(parents=True, exist_ok=True)
        for page, html in rendered:
            (target_dir / f"{page}.html").write_text(html, encoding='utf-8')
            self.line(f"  {page} -> {target_dir / f'{page}.html'}")

        elapsed = (time.perf_counter() - started) * 1000
        self.success(f"Built {len(rendered)} page(s) into {target_dir} in {elapsed:.0f}ms")
        return 0
