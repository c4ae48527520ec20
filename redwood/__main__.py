import asyncio
import sys

from redwood.console import Console
from redwood.exceptions import install_cli_error_handler


def main(argv=None):
    install_cli_error_handler()
    return asyncio.run(Console().run(argv if argv is not None else sys.argv))


if __name__ == '__main__':
    sys.exit(main())
