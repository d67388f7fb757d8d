from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An isolated user data directory so no test touches the real one.
3. Shared tree and cursor fixtures.
"""

import os
import sys
import tempfile

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

# Must be set before treenav.domain.config resolves its STATE_FILE
os.environ["TREENAV_HOME"] = tempfile.mkdtemp(prefix="treenav-tests-")

from treenav.domain.path_models import Path  # noqa: E402
from treenav.domain.tree_models import LEAF, Branch, Tree, generate  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "gui: controller tests driven through mocked views")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def small_tree() -> Tree:
    """
    generate(2, 2):

        2
        ├── 1 (Leaf, Leaf)
        └── 1 (Leaf, Leaf)
    """
    return generate(2, 2)


@pytest.fixture
def ragged_tree() -> Tree:
    """
    Irregular tree mixing leaves, empty branches and uneven fan-out.

        10
        ├── 20
        │   ├── Leaf
        │   └── 21 (no children)
        ├── Leaf
        └── 30
            └── 31
                └── Leaf
    """
    return Branch(10, (
        Branch(20, (LEAF, Branch(21, ()))),
        LEAF,
        Branch(30, (Branch(31, (LEAF,)),)),
    ))


@pytest.fixture
def make_path():
    """Build a root-to-leaf Path from positional steps."""
    def _make(*steps: int) -> Path:
        return Path.from_steps(steps)
    return _make
