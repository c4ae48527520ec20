"""
Component Loader
Reads template assets and loads context providers for a view
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from redwood.defaults import TEMPLATE_ENCODING
from redwood.exceptions import (
    ComponentNotFound, ContextLoadError, ContextTypeNotFound, RedwoodException
)
from redwood.logging import getLogger
from redwood.support.class_loader import ClassLoader
from redwood.view.components import ComponentKind, ComponentRegistry
from redwood.view.registry import ContextRegistry
from redwood.view.resolver import PathResolver, normalize_view_name

logger = getLogger(__name__)


@dataclass(frozen=True)
class LoadedComponent:
    """One loaded asset: template text, or a context provider"""
    kind: ComponentKind
    text: Optional[str] = None
    provider: Optional[Callable[[], Any]] = None
    path: Optional[Path] = None

    @property
    def is_template(self) -> bool:
        return self.text is not None

    @property
    def is_code(self) -> bool:
        return self.provider is not None


class ComponentLoader:
    """
    Loads a set of components for a view

    Template kinds are read verbatim. Code kinds resolve to a context
    provider: an explicitly registered one when present, otherwise the
    conventionally named class from the view's context file. Context
    files are executed into a module private to the call, so nothing
    they define outlives the load in sys.modules.
    """

    def __init__(self, registry: ComponentRegistry, resolver: PathResolver = None,
                 contexts: ContextRegistry = None):
        self.registry = registry
        self.resolver = resolver or PathResolver(registry)
        self.contexts = contexts if contexts is not None else ContextRegistry()

    def load(self, view: str, kinds: Iterable[Union[ComponentKind, str]] = (),
             namespace: Optional[str] = '') -> Dict[ComponentKind, LoadedComponent]:
        """
        Load the requested components of a view, in the order requested

        Args:
            view: Name of the view
            kinds: Component kinds to load
            namespace: Optional namespace appended to the view name

        Returns:
            Mapping of kind to loaded component (empty when no kinds are given)

        Raises:
            InvalidViewName: If the view name is empty
            UnknownComponentKind: If a kind is not registered
            ComponentNotFound: If a component file does not exist
            ContextTypeNotFound: If a context file lacks the expected class
            ContextLoadError: If a context file fails to execute
        """
        kinds = list(kinds)
        if not kinds:
            return {}

        view = normalize_view_name(view)
        namespace = namespace or ''

        loaded: Dict[ComponentKind, LoadedComponent] = {}
        for kind in kinds:
            kind = ComponentKind.coerce(kind)
            descriptor = self.registry.descriptor(kind)

            if descriptor.is_code:
                provider = self.contexts.get(view, namespace, kind)
                if provider is not None:
                    logger.debug("Using registered %s provider for view '%s%s'", kind.value, view, namespace)
                    loaded[kind] = LoadedComponent(kind, provider=provider)
                    continue

            path = self.resolver.resolve(kind, view, namespace)
            if not path.is_file():
                raise ComponentNotFound(
                    f"The '{kind.value}' file for the '{view}' view does not exist",
                    kind=kind.value, view=view, namespace=namespace or None, path=path
                )

            if descriptor.is_code:
                loaded[kind] = LoadedComponent(
                    kind, provider=self._load_provider(kind, view, namespace, path), path=path
                )
            else:
                loaded[kind] = LoadedComponent(
                    kind, text=path.read_text(encoding=TEMPLATE_ENCODING), path=path
                )
            logger.debug("Loaded %s component from %s", kind.value, path)

        return loaded

    def split_name(self, file_name: str) -> Tuple[str, str]:
        """
        Recover (view, namespace) from a component file name

        Namespaces are concatenated into file names, so 'homeblog' is either
        the view 'homeblog' or the view 'home' in the 'blog' namespace. The
        split whose context provider exists (registered, or defined in the
        context file under its conventional name) wins, preferring no
        namespace. Without a match the whole name is the view.

        Raises:
            ContextLoadError: If the context file fails to execute
        """
        kind = ComponentKind.CONTEXT
        candidates = [(file_name, '')] + [
            (file_name[:i], file_name[i:]) for i in range(len(file_name) - 1, 0, -1)
        ]

        for view, namespace in candidates:
            if self.contexts.get(view, namespace, kind) is not None:
                return view, namespace

        path = self.resolver.resolve(kind, file_name)
        if path.is_file():
            classes = ClassLoader.classes(self._execute(kind, file_name, '', path))
            for view, namespace in candidates:
                if self.resolver.type_name(kind, view, namespace) in classes:
                    return view, namespace

        return file_name, ''

    def _execute(self, kind: ComponentKind, view: str, namespace: str, path: Path):
        try:
            return ClassLoader.load_file(path, module_name=f"{path.parent.name}.{path.stem}")
        except RedwoodException:
            raise
        except Exception as e:
            raise ContextLoadError(
                f"Context module could not be loaded: {type(e).__name__}: {e}",
                kind=kind.value, view=view, namespace=namespace or None, path=path
            ) from e

    def _load_provider(self, kind: ComponentKind, view: str, namespace: str, path: Path):
        """Execute a context file and pick out its conventionally named class"""
        type_name = self.resolver.type_name(kind, view, namespace)
        module = self._execute(kind, view, namespace, path)

        provider = ClassLoader.classes(module).get(type_name)
        if provider is None:
            raise ContextTypeNotFound(
                f"Expected class '{type_name}' in context file",
                type_name=type_name, view=view, namespace=namespace or None, path=path
            )
        return provider
