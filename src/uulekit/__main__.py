import sys

from uulekit.cli import main

sys.exit(main())
