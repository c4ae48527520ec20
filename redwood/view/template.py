"""
Jinja2 Template Engine Integration
"""
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from jinja2.exceptions import TemplateError

from redwood.exceptions import TemplateRenderError


class TemplateEngine:
    """Jinja2 wrapper that executes template text against a scope"""

    def __init__(self, search_path: Union[str, Path], encoding: str = 'utf-8'):
        """
        Initialize the template environment

        Args:
            search_path: Directory templates may {% include %} from
            encoding: Encoding of included files

        Values are inserted as-is (no autoescaping), undefined names are an
        error, and nothing is cached between renders.
        """
        self.search_path = Path(search_path)
        self.environment = Environment(
            loader=FileSystemLoader(str(self.search_path), encoding=encoding),
            autoescape=False,
            undefined=StrictUndefined,
            cache_size=0,
            auto_reload=True,
            keep_trailing_newline=True,
        )

        # Global context (available in all templates)
        self.globals: Dict[str, Any] = {}

    def render(self, text: str, scope: Optional[Mapping[str, Any]] = None, **details: Any) -> str:
        """
        Compile and execute template text

        Args:
            text: Template source
            scope: Variables available to the template
            **details: View details (view, kind) for error reports

        Returns:
            Rendered string

        Raises:
            TemplateRenderError: On syntax errors or undefined names
        """
        template_context = {}
        template_context.update(self.globals)
        template_context.update(scope or {})

        try:
            template = self.environment.from_string(text)
            return template.render(template_context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"{type(e).__name__}: {e.message or e}",
                line=getattr(e, 'lineno', None),
                **details
            ) from e

    def add_global(self, key: str, value: Any):
        """Add a global variable available in all templates"""
        self.globals[key] = value
