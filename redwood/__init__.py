"""
Redwood
Convention-over-configuration HTML rendering for static sites
"""
from redwood.view import ViewEngine, RenderRequest, Scope, Context, ContextRegistry
from redwood.support import init_project, resolve_config_path

__version__ = '0.2.0'

__all__ = [
    'ViewEngine',
    'RenderRequest',
    'Scope',
    'Context',
    'ContextRegistry',
    'init_project',
    'resolve_config_path',
    '__version__',
]
