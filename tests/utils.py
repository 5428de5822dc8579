"""Test utilities for the htom test suite.

Helpers for checking the structure of generated Maud markup.
"""

from __future__ import annotations


def leading_spaces(line: str) -> int:
    """Return the number of leading spaces of a line."""
    return len(line) - len(line.lstrip(" "))


def assert_blocks_balanced(markup: str) -> None:
    """Assert every block opening line is closed by a ``}`` line at the same indent.

    Raises
    ------
    AssertionError
        If a closing line has no opener, closes at a different indent, or an
        opener is left unclosed.

    """
    stack: list[int] = []
    for number, line in enumerate(markup.split("\n"), start=1):
        if line.endswith(" {"):
            stack.append(leading_spaces(line))
        elif line.strip() == "}":
            assert stack, f"line {number}: closing brace without an opening line"
            opened_at = stack.pop()
            assert opened_at == leading_spaces(line), f"line {number}: closes at a different indent"
    assert not stack, f"{len(stack)} block(s) left open"


def body_lines(markup: str) -> list[str]:
    """Strip the ``html! {`` wrapper of body-only markup and dedent by four spaces."""
    lines = markup.split("\n")
    assert lines[0] == "html! {"
    assert lines[-1] == "}"
    return [line[4:] for line in lines[1:-1]]
