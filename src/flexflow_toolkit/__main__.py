import sys

from flexflow_toolkit.cli import main

sys.exit(main())
