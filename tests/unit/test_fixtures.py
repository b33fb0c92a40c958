"""
Fixture tests: each tests/fixtures/t*.fl is parsed and its printed
definitions are compared to the matching .expected.txt file.
"""

from pathlib import Path

import pytest
from funclang.core import parse_source
from funclang.syntax import format_node

FIXTURES = sorted((Path(__file__).parent.parent / "fixtures").glob("t*.fl"))


def test_fixtures_present(fixtures_dir):
    """Test that fixture discovery finds the bundled programs."""
    assert len(list(fixtures_dir.glob("t*.fl"))) >= 3


@pytest.mark.parametrize("fixture", FIXTURES, ids=lambda p: p.stem)
def test_fixture_output(fixture):
    """Test that parser output matches the expected dump."""
    expected_file = fixture.with_name(f"{fixture.stem}.expected.txt")
    expected = expected_file.read_text(encoding="utf-8").replace("\r\n", "\n").rstrip()

    result = parse_source(fixture.read_text(encoding="utf-8"))
    actual = "\n".join(format_node(d) for d in result.definitions)

    assert actual == expected


def test_recovery_fixture_reports_errors():
    """Test that the recovery fixture really contains failing units."""
    source = (Path(__file__).parent.parent / "fixtures" / "t03_recovery.fl").read_text(encoding="utf-8")
    result = parse_source(source)
    assert len(result.errors) == 3


def test_recovery_fixture_keeps_every_unit():
    """Test that one-token recovery keeps both halves of a broken definition."""
    source = (Path(__file__).parent.parent / "fixtures" / "t03_recovery.fl").read_text(encoding="utf-8")
    result = parse_source(source)
    assert [format_node(d) for d in result.definitions] == [
        "(def __anon_func__ () a)",
        "(def __anon_func__ () a)",
        "(def __anon_func__ () foo)",
        "(def __anon_func__ () (+ 1 2))",
    ]
