"""
View Engine
Convention-based rendering of pages and partials
"""
import time
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from redwood.defaults import (
    DEFAULT_SOURCE_DIR, ENV_FILE_NAME, LAYOUT_CONTENT_VARIABLE, TEMPLATE_ENCODING
)
from redwood.logging import getLogger
from redwood.support import Config, EnvHelper, resolve_config_path
from redwood.view.components import ComponentKind, ComponentRegistry
from redwood.view.context import bind_context
from redwood.view.loader import ComponentLoader
from redwood.view.registry import ContextRegistry
from redwood.view.request import RenderRequest
from redwood.view.resolver import PathResolver
from redwood.view.template import TemplateEngine

logger = getLogger(__name__)


class ViewEngine:
    """
    Renders views to HTML.

    The set of all assets required to render a page, such as the page
    template and its context, are collectively known as a view. View
    assets must be located in specific locations under the root:

        pages/home.html        page template
        contexts/home.py       defines HomeContext, whose context() returns a Scope
        layouts/main.html      optional layout, receives the page as {{ content }}
        partials/header.html   static fragments

    Usage:
        engine = ViewEngine('/site/src')

        # Render a page
        engine.render('home')
        engine.render('home', layout='main')
        engine.render(page='home', namespace='blog')

        # Render a partial
        engine.render(partial='header')
        engine.render({'partial': 'header'})
    """

    def __init__(
        self,
        root: Union[str, Path, None] = None,
        components: Optional[Mapping[str, Mapping[str, str]]] = None,
        contexts: Optional[ContextRegistry] = None,
        default_layout: Optional[str] = None,
    ):
        """
        Create a new ViewEngine

        Args:
            root: Directory that is the immediate parent of all view
                component folders (defaults to the current directory)
            components: Per-kind {'dir', 'ext'} overrides
            contexts: Explicitly registered context providers
            default_layout: Layout used when a page request names none

        Raises:
            InvalidRoot: If root is not an existing directory
        """
        self.registry = ComponentRegistry(root if root is not None else Path.cwd(), components)
        self.resolver = PathResolver(self.registry)
        self.contexts = contexts if contexts is not None else ContextRegistry()
        self.loader = ComponentLoader(self.registry, self.resolver, self.contexts)
        self.default_layout = default_layout or None

        self.templates = TemplateEngine(self.registry.root, encoding=TEMPLATE_ENCODING)
        self.templates.add_global('partial', self._include_partial)

    @classmethod
    def from_config(cls, config_path: Union[str, Path, None] = None,
                    contexts: Optional[ContextRegistry] = None) -> 'ViewEngine':
        """
        Build an engine from a project's .redwood.yaml

        Args:
            config_path: Config file (searched for upwards from cwd when omitted)
            contexts: Explicitly registered context providers

        Raises:
            ConfigNotFound: If no config file can be found
            ConfigException: If the config file cannot be read
            InvalidRoot: If view.root is not an existing directory
        """
        path = Path(config_path) if config_path is not None else resolve_config_path()
        Config.load(path)

        EnvHelper.load(path.parent / ENV_FILE_NAME)
        app_env = EnvHelper.get('APP_ENV')
        if app_env:
            Config.set('app.env', app_env)

        root = Config.base_path(Config.get('view.root', DEFAULT_SOURCE_DIR))
        return cls(
            root,
            components=Config.get('view.components'),
            contexts=contexts,
            default_layout=Config.get('view.default_layout'),
        )

    @property
    def root(self) -> Path:
        return self.registry.root

    def components(self):
        """Gets the view component descriptors"""
        return self.registry.descriptors()

    def render(self, request: Any = None, /, **options: Any) -> str:
        """
        Render a view to HTML

        Args:
            request: View name (renders a page), options mapping, or RenderRequest
            **options: page, partial, layout, namespace, locals

        Returns:
            The rendered view as an HTML string

        Raises:
            AmbiguousRenderMode: If both or neither of page/partial are given
            InvalidRenderOptions: If the request is malformed
            RedwoodException: Any loading or binding failure for the view
        """
        request = RenderRequest.parse(request, **options)
        if request.is_page:
            return self.render_page(request)
        return self.render_partial(request)

    def render_page(self, request: RenderRequest) -> str:
        """
        Render a page view: its template executed against its context

        Nothing is rendered until every component has loaded and the
        context has produced a valid Scope.
        """
        started = time.perf_counter()
        view, namespace = request.name, request.namespace
        layout_name = request.layout or self.default_layout

        components = self.loader.load(view, [ComponentKind.PAGE, ComponentKind.CONTEXT], namespace)
        layout = None
        if layout_name:
            layout = self.loader.load(layout_name, [ComponentKind.LAYOUT])[ComponentKind.LAYOUT]

        context = components[ComponentKind.CONTEXT]
        scope = bind_context(
            context.provider, view=view, namespace=namespace or None, path=context.path
        )
        if request.locals:
            scope = scope.merged(request.locals)

        html = self.templates.render(
            components[ComponentKind.PAGE].text, scope,
            kind=ComponentKind.PAGE.value, view=view, namespace=namespace or None
        )
        if layout is not None:
            html = self.templates.render(
                layout.text, scope.merged({LAYOUT_CONTENT_VARIABLE: html}),
                kind=ComponentKind.LAYOUT.value, view=layout_name
            )

        logger.info(
            "Rendered page '%s%s' in %.1fms", view, namespace,
            (time.perf_counter() - started) * 1000,
            extra={'view': view, 'namespace': namespace, 'layout': layout_name}
        )
        return html

    def render_partial(self, request: RenderRequest) -> str:
        """
        Render a partial view

        Partials are returned as stored, without template execution.
        Passing locals to partials is not supported yet; they are accepted
        and ignored.
        """
        components = self.loader.load(request.name, [ComponentKind.PARTIAL], request.namespace)
        if request.locals:
            logger.debug(
                "Ignoring locals for partial '%s%s': partials are not parameterized",
                request.name, request.namespace
            )
        return components[ComponentKind.PARTIAL].text

    def page_names(self) -> List[str]:
        """Names of every page template under the pages folder"""
        descriptor = self.registry.descriptor(ComponentKind.PAGE)
        if not descriptor.directory.is_dir():
            return []
        return sorted(
            path.name[:-len(descriptor.extension)]
            for path in descriptor.directory.iterdir()
            if path.is_file() and path.name.endswith(descriptor.extension)
        )

    def views(self) -> List[Tuple[str, str, str]]:
        """
        Every page as (page file name, view, namespace)

        Raises:
            ContextLoadError: If a context file fails to execute
        """
        return [(page, *self.loader.split_name(page)) for page in self.page_names()]

    def _include_partial(self, name: str, namespace: str = '') -> str:
        """Template global: {{ partial('header') }}"""
        return self.render(partial=name, namespace=namespace)
