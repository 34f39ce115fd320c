"""Allow running regionmesh as ``python -m regionmesh``."""

from __future__ import annotations

import sys

from regionmesh.cli import main

sys.exit(main())
