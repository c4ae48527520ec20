"""
Redwood Support Classes
"""

from redwood.support.config import Config, ConfigObject
from redwood.support.config_resolver import resolve_config_path
from redwood.support.env_helper import EnvHelper
from redwood.support.class_loader import ClassLoader
from redwood.support.str import Str
from redwood.support.project import init_project

__all__ = [
    'Config',
    'ConfigObject',
    'resolve_config_path',
    'EnvHelper',
    'ClassLoader',
    'Str',
    'init_project',
]
