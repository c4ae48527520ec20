"""
Exceptions Package
Redwood error types and CLI error reporting
"""
from redwood.exceptions.cli_formatter import CliColors, CliBox, _colorize, _box_line
from redwood.exceptions.cli_exception import install_cli_error_handler, handle_cli_exceptions
from redwood.exceptions.custom import (
    RedwoodException,
    InvalidRoot,
    UnknownComponentKind,
    InvalidViewName,
    ComponentNotFound,
    ContextTypeNotFound,
    ContextLoadError,
    InvalidContextBinding,
    TemplateRenderError,
    RenderRequestException,
    AmbiguousRenderMode,
    InvalidRenderOptions,
    ConfigException,
    ConfigNotFound,
    ProjectAlreadyExists,
)

__all__ = [
    # CLI formatting
    'CliColors',
    'CliBox',
    '_colorize',
    '_box_line',
    'install_cli_error_handler',
    'handle_cli_exceptions',

    # Custom exceptions
    'RedwoodException',
    'InvalidRoot',
    'UnknownComponentKind',
    'InvalidViewName',
    'ComponentNotFound',
    'ContextTypeNotFound',
    'ContextLoadError',
    'InvalidContextBinding',
    'TemplateRenderError',
    'RenderRequestException',
    'AmbiguousRenderMode',
    'InvalidRenderOptions',
    'ConfigException',
    'ConfigNotFound',
    'ProjectAlreadyExists',
]
