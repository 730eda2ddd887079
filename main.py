import sys

from lineshell.shell import main

if __name__ == "__main__":
    sys.exit(main())
