"""
Config Resolver
Locates the project config file by walking up from a start directory
"""
from pathlib import Path
from typing import Union

from redwood.defaults import CONFIG_FILE_NAME
from redwood.exceptions import ConfigNotFound


def resolve_config_path(
    start_dir: Union[str, Path, None] = None,
    file_name: str = CONFIG_FILE_NAME
) -> Path:
    """
    Resolve the location of the config file

    If no config file exists in the start directory, then the parent
    directory is checked. This is done until the file is found or the
    filesystem root is reached.

    Args:
        start_dir: Directory to start from (defaults to current working directory)
        file_name: Config file name to look for

    Returns:
        Absolute path to the config file

    Raises:
        ConfigNotFound: If the root directory is reached without a match
    """
    start = Path(start_dir) if start_dir is not None else Path.cwd()
    config_dir = start.resolve()

    while not (config_dir / file_name).is_file():
        # A path is equal to its parent if and only if it is the root directory
        if config_dir == config_dir.parent:
            raise ConfigNotFound(
                f"Could not find a {file_name} file",
                start_dir=start.resolve()
            )
        config_dir = config_dir.parent

    return config_dir / file_name
