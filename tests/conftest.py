"""Pytest configuration and fixtures."""

import sys
import tempfile
from collections.abc import Generator
from itertools import product
from pathlib import Path

import pytest

# Add src directory to path so tests use local code, not installed package
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(scope="session")
def short_alleles() -> list[str]:
    """Every allele of length 1-3 over a three-letter alphabet."""
    return ["".join(p) for n in range(1, 4) for p in product("ACG", repeat=n)]
