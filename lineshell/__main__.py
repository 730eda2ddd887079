import sys

from lineshell.shell import main

sys.exit(main())
