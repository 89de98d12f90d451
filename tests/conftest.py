"""
pytest configuration and shared fixtures for goskeleton tests.

Fixtures
--------
shop_tree : MappingTemplateTree
    The minimal ``shop`` template tree with one marker-suffixed Go file.

output_dir : Path
    A clean directory to generate projects into.
"""

from pathlib import Path

import pytest

from goskeleton.tree import MappingTemplateTree


@pytest.fixture
def shop_tree() -> MappingTemplateTree:
    """A template tree with one directory and one marker-suffixed file."""
    return MappingTemplateTree({
        "template": None,
        "template/cmd": None,
        "template/cmd/main.go.tmpl": b"package main // {{ Name }}",
    })


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Create an empty directory for generated projects."""
    out = tmp_path / "out"
    out.mkdir()
    return out


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "bundled: tests that render the bundled template tree"
    )
