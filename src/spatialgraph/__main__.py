import sys

from spatialgraph.main import main

if __name__ == "__main__":
    sys.exit(main())
