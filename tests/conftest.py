import logging
import textwrap
from pathlib import Path

import pytest

from redwood.support import Config


HOME_CONTEXT = '''
from redwood.view import Context, Scope


class HomeContext(Context):
    def context(self):
        return Scope(title="Hello")
'''


def write(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip('\n'), encoding='utf-8')
    return path


@pytest.fixture(autouse=True)
def reset_config():
    Config.reset()
    yield
    Config.reset()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger('redwood')
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def site(tmp_path):
    """A view root with the four component folders and a 'home' view"""
    root = tmp_path / 'src'
    for folder in ('pages', 'contexts', 'partials', 'layouts'):
        (root / folder).mkdir(parents=True)

    write(root, 'pages/home.html', '<h1>{{ title }}</h1>\n')
    write(root, 'contexts/home.py', HOME_CONTEXT)
    return root


@pytest.fixture
def write_file():
    return write
