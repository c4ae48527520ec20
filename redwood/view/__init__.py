"""
View Package
Convention-over-configuration page and partial rendering
"""
from redwood.view.components import ComponentKind, ComponentDescriptor, ComponentRegistry
from redwood.view.resolver import PathResolver
from redwood.view.context import Scope, Context, bind_context
from redwood.view.registry import ContextRegistry
from redwood.view.loader import ComponentLoader, LoadedComponent
from redwood.view.request import RenderRequest, RenderMode
from redwood.view.template import TemplateEngine
from redwood.view.engine import ViewEngine

__all__ = [
    # Core
    'ViewEngine',
    'RenderRequest',
    'RenderMode',

    # Contexts
    'Scope',
    'Context',
    'ContextRegistry',
    'bind_context',

    # Components
    'ComponentKind',
    'ComponentDescriptor',
    'ComponentRegistry',
    'ComponentLoader',
    'LoadedComponent',
    'PathResolver',
    'TemplateEngine',
]
