import sys

from timespan.cli import main

sys.exit(main())
