# topmark:header:start
#
#   project      : Author Intrusion
#   file         : test_output.py
#   file_relpath : tests/analysis/test_output.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Tests for the collecting and console output sinks."""

from __future__ import annotations

import io

import pytest

from intrusion.analysis.model import Severity
from intrusion.analysis.output import CollectingOutput, ConsoleOutput
from intrusion.errors import OutputStateError
from intrusion.model.location import Location

LOC = Location("story.md", 1, 4, 1, 7)


def test_collecting_output_groups_per_block() -> None:
    """Each start/end pair produces one block."""
    output = CollectingOutput()

    output.write_start()
    output.write_info("first run")
    output.write_warning("echo", LOC)
    output.write_end()
    output.write_start()
    output.write_end()

    assert len(output.blocks) == 2
    assert all(block.closed for block in output.blocks)
    assert [d.message for d in output.blocks[0].items] == ["first run", "echo"]
    assert output.blocks[1].items == []
    assert len(output) == 2


def test_collecting_output_keeps_locations() -> None:
    """Warnings and errors carry their location; info does not."""
    output = CollectingOutput()
    output.write_start()
    output.write_info("note")
    output.write_error("broken", LOC)
    output.write_end()

    info, error = output.items
    assert info.location is None
    assert error.location == LOC
    assert error.severity is Severity.ERROR


def test_collecting_output_sorted_and_stats() -> None:
    """Sorting uses severity ordinals; stats count per severity."""
    output = CollectingOutput()
    output.write_start()
    output.write_info("i")
    output.write_warning("w", LOC)
    output.write_error("e", LOC)
    output.write_end()

    assert [d.message for d in output.sorted()] == ["e", "w", "i"]
    assert output.to_dict() == {"error": 1, "warning": 1, "info": 1}
    assert output.stats().total == 3
    assert output.has_error()


def test_write_outside_block_is_rejected() -> None:
    """Diagnostics can only be written inside a block."""
    output = CollectingOutput()

    with pytest.raises(OutputStateError):
        output.write_info("too early")


def test_unbalanced_brackets_are_rejected() -> None:
    """Nested starts and unmatched ends fail."""
    output = CollectingOutput()

    with pytest.raises(OutputStateError):
        output.write_end()

    output.write_start()
    with pytest.raises(OutputStateError):
        output.write_start()
    assert output.is_open


def test_console_output_routes_by_severity() -> None:
    """Info goes to ``out``; warnings and errors go to ``err``."""
    out = io.StringIO()
    err = io.StringIO()
    output = ConsoleOutput(enable_color=False, out=out, err=err, header="== echoes")

    output.write_start()
    output.write_info("2 lines checked")
    output.write_warning("repeated 'cat'", LOC)
    output.write_error("unterminated quote", Location("story.md"))
    output.write_end()

    assert out.getvalue().splitlines() == ["== echoes", "info: 2 lines checked"]
    assert err.getvalue().splitlines() == [
        "story.md:2:5: warning: repeated 'cat'",
        "story.md: error: unterminated quote",
    ]
