"""
View Components
The four kinds of view asset and where each one lives under a project root
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from redwood.defaults import VIEW_FOLDERS, VIEW_EXTENSIONS, CODE_EXTENSION
from redwood.exceptions import InvalidRoot, UnknownComponentKind


class ComponentKind(str, Enum):
    """Asset categories that make up a view"""
    PAGE = 'page'
    CONTEXT = 'context'
    PARTIAL = 'partial'
    LAYOUT = 'layout'

    @classmethod
    def coerce(cls, value: Union['ComponentKind', str]) -> 'ComponentKind':
        """
        Accept a kind or its string value

        Raises:
            UnknownComponentKind: If value names no kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownComponentKind(kind=value) from None


@dataclass(frozen=True)
class ComponentDescriptor:
    """Directory and file extension for one component kind"""
    directory: Path
    extension: str

    @property
    def is_code(self) -> bool:
        """Code assets are loaded as Python, everything else is template text"""
        return self.extension == CODE_EXTENSION


class ComponentRegistry:
    """
    Fixed mapping of component kind to descriptor for one project root

    View assets must be located in specific locations:

        * page templates must be located in the `pages` directory
        * layout templates must be located in the `layouts` directory
        * partials must be located in the `partials` directory
        * contexts must be located in the `contexts` directory

    Directory names and extensions may be overridden at construction,
    for the four known kinds only:

        ComponentRegistry(root, {'page': {'dir': 'views', 'ext': '.j2'}})
    """

    def __init__(self, root: Union[str, Path], overrides: Optional[Mapping[str, Mapping[str, str]]] = None):
        root = Path(root)
        if not root.is_dir():
            raise InvalidRoot(
                f"The root path '{root}' is not an existing directory",
                root=root
            )
        self._root = root.resolve()

        overrides = {ComponentKind.coerce(kind): spec for kind, spec in (overrides or {}).items()}

        descriptors: Dict[ComponentKind, ComponentDescriptor] = {}
        for kind in ComponentKind:
            spec = overrides.get(kind) or {}
            folder = spec.get('dir') or VIEW_FOLDERS[kind.value]
            extension = spec.get('ext') or VIEW_EXTENSIONS[kind.value]
            if not extension.startswith('.'):
                extension = f".{extension}"
            descriptors[kind] = ComponentDescriptor(self._root / folder, extension)

        self._descriptors = MappingProxyType(descriptors)

    @property
    def root(self) -> Path:
        return self._root

    def descriptor(self, kind: Union[ComponentKind, str]) -> ComponentDescriptor:
        """
        Get the descriptor for a component kind

        Raises:
            UnknownComponentKind: If the kind is not registered
        """
        kind = ComponentKind.coerce(kind)
        if kind not in self._descriptors:
            raise UnknownComponentKind(kind=kind.value)
        return self._descriptors[kind]

    def descriptors(self) -> Mapping[ComponentKind, ComponentDescriptor]:
        """Read-only view of every registered descriptor"""
        return self._descriptors

    def __contains__(self, kind) -> bool:
        try:
            return ComponentKind.coerce(kind) in self._descriptors
        except UnknownComponentKind:
            return False

    def __iter__(self) -> Iterator[ComponentKind]:
        return iter(self._descriptors)
