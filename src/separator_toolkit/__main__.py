import sys

from separator_toolkit.cli import main

sys.exit(main())
