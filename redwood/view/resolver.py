"""
Path Resolver
Maps (kind, view, namespace) to the asset path and context class name
"""
from pathlib import Path
from typing import Optional, Union

from redwood.defaults import CONTEXT_NAMESPACE_SEPARATOR
from redwood.exceptions import InvalidViewName
from redwood.support.str import Str
from redwood.view.components import ComponentKind, ComponentRegistry


def normalize_view_name(view) -> str:
    """
    Strip surrounding whitespace from a view name

    Raises:
        InvalidViewName: If nothing is left
    """
    if not isinstance(view, str) or not view.strip():
        raise InvalidViewName("Invalid view name", view=repr(view))
    return view.strip()


class PathResolver:
    """
    Resolves where a view's assets live

    A namespace is extra text appended to the view name before the
    extension, not a subdirectory:

        resolver.resolve('page', 'home', 'blog')  # <root>/pages/homeblog.html
    """

    def __init__(self, registry: ComponentRegistry):
        self.registry = registry

    def resolve(self, kind: Union[ComponentKind, str], view: str, namespace: Optional[str] = '') -> Path:
        """
        Get the expected path of one component of a view

        Raises:
            InvalidViewName: If the view name is empty after trimming
            UnknownComponentKind: If the kind is not registered
        """
        view = normalize_view_name(view)
        descriptor = self.registry.descriptor(kind)
        return descriptor.directory / f"{view}{namespace or ''}{descriptor.extension}"

    def type_name(self, kind: Union[ComponentKind, str], view: str, namespace: Optional[str] = '') -> str:
        """
        Get the conventional class name for a code component

        Example:
            resolver.type_name('context', 'home', 'blog')  # 'BlogHomeContext'
            resolver.type_name('context', 'home')  # 'HomeContext'
        """
        view = normalize_view_name(view)
        kind = ComponentKind.coerce(kind)
        prefix = Str.capitalize(namespace) + CONTEXT_NAMESPACE_SEPARATOR if namespace else ''
        return prefix + Str.capitalize(view) + Str.capitalize(kind.value)
