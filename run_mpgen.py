import sys

from mpgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
