"""
Global test configuration for flicks.

This module provides global pytest configuration and fixtures.
"""

import os
import sys
from pathlib import Path

# Keep solver info logs off stdout so CLI JSON output stays parseable.
os.environ.setdefault("FLICKS_LOG_LEVEL", "WARNING")

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import pytest

from flicks.constraints import DESIGN_CONSTRAINTS


@pytest.fixture
def design_constraints():
    return DESIGN_CONSTRAINTS
