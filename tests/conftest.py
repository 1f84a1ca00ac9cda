"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed tileman package.
Sample lines and the tile folder builder live in samples.py.
"""

from pathlib import Path

import pytest

from samples import write_tile_folder


@pytest.fixture
def tile_folder(tmp_path) -> Path:
    """A tile folder with a root init and subfolders (see samples.write_tile_folder)."""
    return write_tile_folder(tmp_path / "tiles")
