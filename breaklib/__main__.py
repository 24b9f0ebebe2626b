import sys

from breaklib.cli import main

sys.exit(main())
