import pytest

HEADER = """hero.png
size: 256,128
format: RGBA8888
filter: Linear,Linear
repeat: none
"""

SAMPLE_ATLAS = """
hero.png
size: 256,128
format: RGBA8888
filter: Linear,Linear
repeat: none
head
  rotate: false
  xy: 2, 2
  size: 50, 40
  orig: 60, 40
  offset: 5, 0
  index: -1
arm
  rotate: true
  xy: 54, 2
  size: 51, 20
  orig: 60, 24
  offset: 3, 1
  index: 0
leg
  rotate: false
  xy: 2, 44
  size: 30, 30
  orig: 30, 30
  offset: 0, 0
  index: 7
"""


@pytest.fixture
def sample_atlas():
    return SAMPLE_ATLAS


@pytest.fixture
def header_only():
    return HEADER


@pytest.fixture
def write_atlas(tmp_path):
    """Write atlas text under tmp_path and return the file path as a string."""
    def _write(relative_path, content):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
