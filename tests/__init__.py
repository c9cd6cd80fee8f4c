"""Test package initialisation.

The project keeps its packages (``models``, ``services``, ``panels`` ...) at
the repository root rather than under a single import package, so the root is
appended to ``sys.path`` here for runs that do not install the project first.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))
