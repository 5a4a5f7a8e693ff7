"""Output formatters for CLI commands.

Provides formatting for:
- Locator patterns (indented tree)
- Element check results (text or JSON)
"""

import json

from ..diagnostics.element_check import ElementCheckResult
from ..locators.pattern import LocatorPattern


def format_pattern(pattern: LocatorPattern, indent: int = 0) -> str:
    """Format a pattern and its nested sub-patterns as an indented tree.

    Args:
        pattern: Pattern to format
        indent: Starting indentation level

    Returns:
        Multi-line string
    """
    lines = [f"{'  ' * indent}- {pattern.describe()}"]
    for child in pattern.children or ():
        lines.append(format_pattern(child, indent + 1))
    return "\n".join(lines)


def format_check_results(results: list[ElementCheckResult], format_type: str = "text") -> str:
    """Format element check results.

    Args:
        results: Results from check_elements()
        format_type: "text" or "json"

    Returns:
        Formatted string output

    Raises:
        ValueError: If format_type is not recognized
    """
    if format_type == "json":
        return _format_json(results)
    elif format_type == "text":
        return _format_text(results)
    else:
        raise ValueError(f"Unknown format type: {format_type}")


def _format_json(results: list[ElementCheckResult]) -> str:
    found = sum(1 for r in results if r.found)
    output = {
        "summary": {"checked": len(results), "found": found, "missing": len(results) - found},
        "elements": [r.to_dict() for r in results],
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def _format_text(results: list[ElementCheckResult]) -> str:
    lines = []
    for r in results:
        if r.found:
            lines.append(f"[OK]   {r.element_path}")
        else:
            lines.append(f"[FAIL] {r.element_path}: {r.error}")

    found = sum(1 for r in results if r.found)
    lines.append("")
    lines.append(f"{found}/{len(results)} elements found")
    return "\n".join(lines)
