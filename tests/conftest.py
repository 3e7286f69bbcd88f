"""Shared fixtures: a small valid map and a helper for writing map files."""

import pytest


SAMPLE_MAP = """0
0
Bob
wood,soil

total:3
0 grass,wood
1 soil
2 stone,wood,wood

exits
0 north:1,east:2
1 south:0
2 west:0
"""


@pytest.fixture
def sample_text():
    return SAMPLE_MAP


@pytest.fixture
def write_map(tmp_path):
    """Write map text to a file under tmp_path and return its path."""
    def _write(text: str, name: str = "world.map"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_map(write_map, sample_text):
    return write_map(sample_text)
