"""Pytest configuration to make the `src/` packages importable.

This ensures that ``import core`` and ``import cli`` work when tests are run
from the repository root without an editable install.
"""

import os
import sys

# src/ = sibling of this tests/ folder
SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)
