"""Allow `python -m devmatrix`."""

import sys

from devmatrix.cli import main

if __name__ == "__main__":
    sys.exit(main())
