"""Allow ``python -m ckconv``."""

import sys

from ckconv.cli import main

sys.exit(main())
