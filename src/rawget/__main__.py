"""src/rawget/__main__.py"""

import sys

from rawget.cli import main

if __name__ == "__main__":
    sys.exit(main())
