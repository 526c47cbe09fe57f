"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from surfkit.geometry.expolygon import ExPolygon


def make_square(x0: float, y0: float, size: float, hole: float = 0.0) -> ExPolygon:
    """Axis-aligned square, optionally with a centred square hole of side ``hole``."""
    contour = [(x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size)]
    holes = []
    if hole > 0:
        cx = x0 + size / 2
        cy = y0 + size / 2
        h = hole / 2
        holes.append([(cx - h, cy - h), (cx - h, cy + h), (cx + h, cy + h), (cx + h, cy - h)])
    return ExPolygon(contour, holes)


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_dir(temp_dir):
    """Create a configuration directory with two settings profiles."""
    config_dir = temp_dir / "config"
    (config_dir / "profiles").mkdir(parents=True)

    fine_profile = """
surfaces:
  simplify_tolerance: 0.005
  default_thickness: 0.2
  default_thickness_layers: 2
  log_level: DEBUG
"""
    (config_dir / "profiles" / "fine.yaml").write_text(fine_profile)

    draft_profile = """
surfaces:
  name: "Draft"
  simplify_tolerance: 0.1
  json_logs: true
"""
    (config_dir / "profiles" / "draft.yaml").write_text(draft_profile)

    # Unrelated YAML files are skipped
    (config_dir / "profiles" / "notes.yaml").write_text("comment: not a profile\n")

    return config_dir


@pytest.fixture
def square():
    """10 x 10 square at the origin."""
    return make_square(0, 0, 10)


@pytest.fixture
def square_with_hole():
    """10 x 10 square at the origin with a 2 x 2 hole in the middle."""
    return make_square(0, 0, 10, hole=2)


@pytest.fixture
def bowtie():
    """Self-intersecting contour; a non-zero union splits it into two triangles."""
    return ExPolygon([(0, 0), (10, 10), (10, 0), (0, 10)])


@pytest.fixture
def make_region():
    """Factory for square regions: ``make_region(x0, y0, size, hole=0.0)``."""
    return make_square
