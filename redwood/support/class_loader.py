"""
Class Loader
Dynamic class loading utility for dotted paths and standalone source files
"""
import importlib
import importlib.util
import inspect
import sys
from pathlib import Path
from types import ModuleType
from typing import Dict, Type, Union
from uuid import uuid4

PRIVATE_MODULE_PREFIX = "redwood._loaded"


class ClassLoader:
    """
    Utility for dynamically loading classes from dotted paths or files

    Example:
        # Load a class by dotted path
        cls = ClassLoader.load('site.contexts.HomeContext')

        # Execute a source file into a module private to the caller
        module = ClassLoader.load_file('/site/src/contexts/home.py')
        classes = ClassLoader.classes(module)
    """

    @staticmethod
    def load(class_path: str) -> Type:
        """
        Load a class from a dotted path string

        Args:
            class_path: Full dotted path to class (e.g., 'site.contexts.HomeContext')

        Returns:
            The class object (not instantiated)

        Raises:
            ImportError: If module cannot be imported
            AttributeError: If class doesn't exist in module
        """
        module_path, class_name = class_path.rsplit('.', 1)
        module = importlib.import_module(module_path)
        return getattr(module, class_name)

    @staticmethod
    def load_file(path: Union[str, Path], module_name: str = None) -> ModuleType:
        """
        Execute a Python source file as a fresh module object

        The module is private to the caller. It is entered in sys.modules
        under a unique name only while its body runs (dataclasses and
        typing look the defining module up there), then removed again, so
        loading the same file twice yields two independent modules.

        Args:
            path: Path to the .py file
            module_name: Name given to the module (defaults to the file stem)

        Returns:
            The executed module

        Raises:
            ImportError: If no loader can be created for the file
            Exception: Anything raised by the module body itself
        """
        path = Path(path)
        private_name = f"{PRIVATE_MODULE_PREFIX}.{module_name or path.stem}_{uuid4().hex}"
        spec = importlib.util.spec_from_file_location(private_name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load module from {path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[private_name] = module
        try:
            spec.loader.exec_module(module)
        finally:
            sys.modules.pop(private_name, None)
        return module

    @staticmethod
    def classes(module: ModuleType) -> Dict[str, Type]:
        """
        Classes bound at a module's top level, keyed by name

        Includes classes the module imported, so a file may re-export
        a class defined elsewhere.
        """
        return dict(inspect.getmembers(module, inspect.isclass))
