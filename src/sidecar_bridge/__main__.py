"""Allow ``python -m sidecar_bridge``."""

import sys

from sidecar_bridge.cli.main import main

sys.exit(main())
