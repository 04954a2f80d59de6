from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A shared on-disk directory tree with known sizes.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a directory tree with known file sizes.

    Structure:
    /project
      /src
        main.py          (100 bytes)
        /pkg
          util.py        (50 bytes)
      /node_modules
        lib.js           (400 bytes)
      /empty
      logo.png           (300 bytes)
      bundle.tar.gz      (200 bytes)
      run.sh             (10 bytes, executable)
      README.md          (25 bytes)
    """
    root = tmp_path / "project"
    root.mkdir()

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_bytes(b"x" * 100)
    (src / "pkg").mkdir()
    (src / "pkg" / "util.py").write_bytes(b"x" * 50)

    (root / "node_modules").mkdir()
    (root / "node_modules" / "lib.js").write_bytes(b"x" * 400)

    (root / "empty").mkdir()

    (root / "logo.png").write_bytes(b"x" * 300)
    (root / "bundle.tar.gz").write_bytes(b"x" * 200)

    script = root / "run.sh"
    script.write_bytes(b"x" * 10)
    script.chmod(0o755)

    (root / "README.md").write_bytes(b"x" * 25)

    return root
