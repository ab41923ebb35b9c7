"""Allow running as `python -m git_status_line`."""

import sys

from git_status_line.cli.main import main

sys.exit(main())
