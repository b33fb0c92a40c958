"""
Pytest configuration and fixtures for funclang tests.
"""

import pytest
import tempfile
from pathlib import Path


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_source_file(temp_dir):
    """Create a sample funclang source file for testing."""
    source_file = temp_dir / "sample.fl"
    source_file.write_text("func add(a, b) a + b\nadd(1, 2)\n", encoding="utf-8")
    return source_file


@pytest.fixture
def make_parser():
    """Provide a factory that builds a Parser over a source string."""
    from funclang.frontend import Parser

    def _make(source, **kwargs):
        return Parser(source, **kwargs)
    return _make


@pytest.fixture
def fixtures_dir():
    """Directory holding the .fl fixtures and their expected dumps."""
    return FIXTURES_DIR
