"""Test configuration helpers for import path setup."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"

src_path = str(SRC_ROOT)

if src_path not in sys.path:
    sys.path.insert(0, src_path)
