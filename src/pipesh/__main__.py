"""pipesh executable module.

The console script entry point is cli.main(), which owns the startup error
boundary; this module only serves `python -m pipesh`.
"""

import sys

from pipesh.cli import main

if __name__ == "__main__":
    sys.exit(main())
