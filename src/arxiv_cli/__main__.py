"""Allow ``python -m arxiv_cli``."""

import sys

from arxiv_cli.app import main

if __name__ == "__main__":
    sys.exit(main())
