"""Module entrypoint for ``python -m docmanager``.

All argument handling and runtime setup happen in ``docmanager.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
