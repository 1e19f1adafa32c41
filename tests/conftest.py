import os
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

# Console-only logging while testing; must be set before relatedness is imported
os.environ.setdefault(
    "RELATEDNESS_CONFIG", str(PROJECT_ROOT / "tests" / "data" / "relatedness_test.yml")
)

from relatedness.model import example_tree  # noqa: E402
from relatedness.validation import repair  # noqa: E402


@pytest.fixture
def canonical_tree():
    """The 8-person demonstration tree, repaired (F moved to generation 0)."""
    return repair(example_tree())
