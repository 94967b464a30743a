import sys

from anglekit.cli import main

sys.exit(main())
