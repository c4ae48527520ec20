"""
Context Registry
Explicit, engine-scoped registration of context providers
"""
import threading
from typing import Any, Callable, Dict, Optional, Tuple, Union

from redwood.support.class_loader import ClassLoader
from redwood.view.components import ComponentKind
from redwood.view.resolver import normalize_view_name

Provider = Union[Callable[[], Any], str]
RegistryKey = Tuple[str, str, ComponentKind]


class ContextRegistry:
    """
    Map of (namespace, view, kind) to a provider factory

    Registered providers take precedence over context files on disk.
    A provider is a class, a zero-argument factory, or a dotted path
    resolved on first use.

    Usage:
        registry = ContextRegistry()
        registry.register('home', HomeContext)
        registry.register('home', 'site.contexts.BlogHome', namespace='blog')

        @registry.context('about')
        class About(Context):
            ...
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._providers: Dict[RegistryKey, Provider] = {}

    @staticmethod
    def _key(view: str, namespace: Optional[str], kind: Union[ComponentKind, str]) -> RegistryKey:
        return (namespace or '', normalize_view_name(view), ComponentKind.coerce(kind))

    def register(self, view: str, provider: Provider, namespace: Optional[str] = '',
                 kind: Union[ComponentKind, str] = ComponentKind.CONTEXT):
        """Register a provider, replacing any previous one for the same key"""
        key = self._key(view, namespace, kind)
        with self._lock:
            self._providers[key] = provider

    def context(self, view: str, namespace: Optional[str] = ''):
        """Class decorator form of register()"""
        def decorator(provider):
            self.register(view, provider, namespace=namespace)
            return provider
        return decorator

    def unregister(self, view: str, namespace: Optional[str] = '',
                   kind: Union[ComponentKind, str] = ComponentKind.CONTEXT) -> bool:
        key = self._key(view, namespace, kind)
        with self._lock:
            return self._providers.pop(key, None) is not None

    def get(self, view: str, namespace: Optional[str] = '',
            kind: Union[ComponentKind, str] = ComponentKind.CONTEXT) -> Optional[Callable[[], Any]]:
        """
        Get the provider for a view, or None when nothing is registered

        Dotted-path providers are imported here and cached in their place.
        """
        key = self._key(view, namespace, kind)
        with self._lock:
            provider = self._providers.get(key)
            if isinstance(provider, str):
                provider = ClassLoader.load(provider)
                self._providers[key] = provider
        return provider

    def __contains__(self, view: str) -> bool:
        return self.get(view) is not None

    def __len__(self) -> int:
        return len(self._providers)
