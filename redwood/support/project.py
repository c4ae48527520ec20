"""
Project Scaffolding
Creates a new Redwood project outline
"""
from pathlib import Path
from typing import Union

import yaml

from redwood.defaults import (
    CONFIG_FILE_NAME, ENV_FILE_NAME, DEFAULT_APP_ENV, DEFAULT_SOURCE_DIR, DEFAULT_OUTPUT_DIR,
    VIEW_FOLDERS, VIEW_EXTENSIONS,
)
from redwood.exceptions import ProjectAlreadyExists
from redwood.logging import getLogger
from redwood.support.env_helper import EnvHelper

logger = getLogger(__name__)

WELCOME_PAGE = """<h1>{{ title }}</h1>
<p>Edit pages/index{ext} and contexts/index{code_ext} to get started.</p>
"""

WELCOME_CONTEXT = '''from redwood.view import Context


class IndexContext(Context):
    def __init__(self):
        self.title = {title!r}
'''


def default_config(name: str) -> dict:
    """Contents of a fresh .redwood.yaml"""
    return {
        'app': {'name': name},
        'view': {
            'root': DEFAULT_SOURCE_DIR,
            'output': DEFAULT_OUTPUT_DIR,
            'default_layout': None,
        },
        'logging': {'level': 'INFO', 'format': 'text'},
    }


def init_project(name: str, base_dir: Union[str, Path, None] = None,
                 with_welcome: bool = True) -> Path:
    """
    Create a new project directory and populate it with a config file,
    a .env file and a folder for each view component kind.

    Args:
        name: Name of the project; also the name of the project directory
        base_dir: Directory to create the project in (defaults to cwd)
        with_welcome: Also write an index page and its context

    Returns:
        Path to the new project directory

    Raises:
        ProjectAlreadyExists: If the target directory already exists
    """
    name = (name or '').strip()
    if not name:
        raise ValueError("Project name must not be empty")

    base = Path(base_dir) if base_dir is not None else Path.cwd()
    root = base / name
    if root.exists():
        raise ProjectAlreadyExists(path=root)

    source = root / DEFAULT_SOURCE_DIR
    for folder in VIEW_FOLDERS.values():
        (source / folder).mkdir(parents=True)

    config_path = root / CONFIG_FILE_NAME
    config_path.write_text(
        yaml.safe_dump(default_config(name), sort_keys=False),
        encoding='utf-8'
    )
    EnvHelper.set('APP_ENV', DEFAULT_APP_ENV, env_path=root / ENV_FILE_NAME, apply=False)

    if with_welcome:
        page_ext = VIEW_EXTENSIONS['page']
        code_ext = VIEW_EXTENSIONS['context']
        (source / VIEW_FOLDERS['page'] / f"index{page_ext}").write_text(
            WELCOME_PAGE.replace('{ext}', page_ext).replace('{code_ext}', code_ext),
            encoding='utf-8'
        )
        (source / VIEW_FOLDERS['context'] / f"index{code_ext}").write_text(
            WELCOME_CONTEXT.format(title=f"Welcome to {name}"),
            encoding='utf-8'
        )

    logger.info("Created project %s", root)
    return root
