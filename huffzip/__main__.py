import sys

from huffzip.cli import main

sys.exit(main())
