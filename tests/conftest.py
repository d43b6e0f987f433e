"""Pytest configuration.

Modules are imported as `src.duration.*` / `src.config.*`. Putting the repository root on
`sys.path` lets `pytest` run from a plain checkout as well as from an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
