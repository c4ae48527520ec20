"""
Custom Exception Classes
Redwood-specific exceptions carrying the view details needed to diagnose them
"""
from typing import Optional, Dict, Any


class RedwoodException(Exception):
    """Base exception for all Redwood exceptions"""
    message = "An error occurred"
    hint: Optional[str] = None

    def __init__(self, message: Optional[str] = None, **context: Any):
        self.message = message or self.__class__.message
        # kind, view, namespace, path... whatever applies to the failure
        self.context: Dict[str, Any] = {
            key: value for key, value in context.items() if value is not None
        }
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ', '.join(f"{key}={value!s}" for key, value in self.context.items())
        return f"{self.message} ({details})"


# ============================================================================
# ENGINE CONSTRUCTION
# ============================================================================

class InvalidRoot(RedwoodException):
    """
    Raised when an engine is constructed with a root that is not an existing directory

    Example:
        raise InvalidRoot(root='/tmp/missing')
    """
    message = "View root must be an existing directory"
    hint = "Check the 'view.root' setting in your .redwood.yaml"


class UnknownComponentKind(RedwoodException):
    """Raised when a component kind is not present in the registry"""
    message = "Unknown view component kind"


# ============================================================================
# VIEW RESOLUTION & LOADING
# ============================================================================

class InvalidViewName(RedwoodException):
    """Raised when a view name is empty or only whitespace"""
    message = "Invalid view name"


class ComponentNotFound(RedwoodException):
    """
    Raised when a resolved view component file does not exist

    Example:
        raise ComponentNotFound(kind='page', view='home', path='/site/src/pages/home.html')
    """
    message = "View component file does not exist"
    hint = "Run 'redwood make:view <name>' to create the missing files"


class ContextTypeNotFound(RedwoodException):
    """
    Raised when a context module loads but does not define the conventional class

    The class name is built from the namespace, view and kind, e.g. BlogHomeContext
    """
    message = "Context module does not define the expected class"
    hint = "Context classes are named [Namespace][View]Context"


class ContextLoadError(RedwoodException):
    """Raised when executing a context module fails"""
    message = "Context module could not be loaded"


class InvalidContextBinding(RedwoodException):
    """Raised when a context provider's context() does not return a Scope"""
    message = "Context method must return a Scope object"
    hint = "Return self.scope(...) or Scope({...}) from context()"


class TemplateRenderError(RedwoodException):
    """Raised when a template fails to compile or execute"""
    message = "Template could not be rendered"


# ============================================================================
# RENDER REQUESTS
# ============================================================================

class RenderRequestException(RedwoodException):
    """Base exception for malformed render requests"""
    message = "Invalid render request"


class AmbiguousRenderMode(RenderRequestException):
    """Raised when a render request sets both or neither of 'page' and 'partial'"""
    message = "Exactly one of 'page' or 'partial' must be given"


class InvalidRenderOptions(RenderRequestException):
    """Raised when a render request has an unsupported shape or option"""
    message = "Render options must be a view name or a mapping of options"


# ============================================================================
# PROJECT & CONFIGURATION
# ============================================================================

class ConfigException(RedwoodException):
    """Raised when the project config file cannot be read"""
    message = "Invalid configuration"


class ConfigNotFound(ConfigException):
    """Raised when no config file exists in the start directory or any parent"""
    message = "Could not find a .redwood.yaml file"
    hint = "Are you running this command in your project directory?"


class ProjectAlreadyExists(RedwoodException):
    """Raised when scaffolding a project into an existing directory"""
    message = "Project could not be created: directory already exists"
