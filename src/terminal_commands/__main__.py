import sys

from terminal_commands.core.cli import main

sys.exit(main())
