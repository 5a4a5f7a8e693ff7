"""Tests for CLI output formatters."""

import json

import pytest

from uilocator.cli.formatters import format_check_results, format_pattern
from uilocator.diagnostics import ElementCheckResult
from uilocator.locators import LocatorPattern


@pytest.fixture
def sample_results():
    """One found and one missing element."""
    return [
        ElementCheckResult("QQMusic.searchBox", True),
        ElementCheckResult(
            "QQMusic.playButton",
            False,
            "Index out of range: 3 (candidates: 1)",
            "INDEX_OUT_OF_RANGE",
        ),
    ]


def test_format_pattern_nested():
    """Test indented pattern tree."""
    pattern = LocatorPattern(
        role="AXTable",
        identifier="searchResult",
        children=[LocatorPattern(role="AXRow", index=0)],
    )

    assert format_pattern(pattern) == (
        "- Role: AXTable, Identifier: searchResult, MatchType: contains, Children: 1\n"
        "  - Role: AXRow, Index: 0, MatchType: contains"
    )


def test_format_text(sample_results):
    """Test text formatting."""
    output = format_check_results(sample_results, "text")

    assert output.splitlines() == [
        "[OK]   QQMusic.searchBox",
        "[FAIL] QQMusic.playButton: Index out of range: 3 (candidates: 1)",
        "",
        "1/2 elements found",
    ]


def test_format_json(sample_results):
    """Test JSON formatting."""
    data = json.loads(format_check_results(sample_results, "json"))

    assert data["summary"] == {"checked": 2, "found": 1, "missing": 1}
    assert data["elements"][1]["error_code"] == "INDEX_OUT_OF_RANGE"


def test_unknown_format(sample_results):
    """Test that unknown formats are rejected."""
    with pytest.raises(ValueError, match="Unknown format type"):
        format_check_results(sample_results, "junit")
