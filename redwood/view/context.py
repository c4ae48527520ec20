"""
View Context
The contract a context provider satisfies to supply template variables
"""
import inspect
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from redwood.exceptions import InvalidContextBinding

_MISSING = object()


class Scope(Mapping[str, Any]):
    """
    Read-only name -> value environment a template is executed against

    Example:
        scope = Scope({'title': 'Hello'}, author='Ada')
        scope.lookup('title')  # 'Hello'
        scope.names()  # ['title', 'author']
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        bindings: Dict[str, Any] = dict(values or {})
        bindings.update(kwargs)
        for name in bindings:
            if not isinstance(name, str):
                raise TypeError(f"Scope names must be strings, got {name!r}")
        self._bindings = bindings

    def lookup(self, name: str, default: Any = _MISSING) -> Any:
        """
        Resolve a name

        Raises:
            KeyError: If the name is unbound and no default is given
        """
        if name in self._bindings:
            return self._bindings[name]
        if default is _MISSING:
            raise KeyError(name)
        return default

    def names(self) -> list:
        """Bound names, in binding order"""
        return list(self._bindings)

    def merged(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> 'Scope':
        """New scope with extra bindings layered on top of this one"""
        bindings = dict(self._bindings)
        bindings.update(values or {})
        bindings.update(kwargs)
        return Scope(bindings)

    def as_dict(self) -> Dict[str, Any]:
        """Copy of the bindings as a plain dict"""
        return dict(self._bindings)

    def __getitem__(self, name: str) -> Any:
        return self._bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self):
        return f"Scope({self._bindings!r})"


class Context:
    """
    Optional base class for context providers

    Public instance attributes become template variables:

        class HomeContext(Context):
            def __init__(self):
                self.title = 'Hello'

    Override context() to build the scope explicitly:

        class HomeContext(Context):
            def context(self):
                return self.scope(posts=load_posts())
    """

    def scope(self, **values: Any) -> Scope:
        """Scope of this instance's public attributes plus the given values"""
        bindings = {
            name: value for name, value in vars(self).items()
            if not name.startswith('_')
        }
        bindings.update(values)
        return Scope(bindings)

    def context(self) -> Scope:
        return self.scope()


def _provider_name(provider: Any) -> str:
    return getattr(provider, '__qualname__', None) or type(provider).__name__


def bind_context(provider: Callable[[], Any], **details: Any) -> Scope:
    """
    Construct a context provider, call its context() and validate the result

    Args:
        provider: Class or zero-argument factory producing the provider
        **details: View details (view, namespace, path) for error reports

    Returns:
        The Scope returned by context()

    Raises:
        InvalidContextBinding: If the provider cannot be constructed without
            arguments, has no callable context(), or context() returns
            anything other than a Scope
    """
    name = _provider_name(provider)

    try:
        inspect.signature(provider).bind()
    except TypeError:
        raise InvalidContextBinding(
            "Context provider must be constructible without arguments",
            provider=name, **details
        ) from None
    except ValueError:
        # Builtins without a signature; let the call itself decide
        pass

    instance = provider()

    method = getattr(instance, 'context', None)
    if not callable(method):
        raise InvalidContextBinding(
            "Context provider must define a context() method",
            provider=name, **details
        )

    scope = method()
    if not isinstance(scope, Scope):
        raise InvalidContextBinding(
            provider=name, returned=type(scope).__name__, **details
        )

    return scope
