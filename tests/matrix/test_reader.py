"""Test TableReader parsing, orientation and error handling."""

import pytest

from matrix2triplets.contracts import FormatError
from matrix2triplets.matrix.reader import TableReader

pytestmark = pytest.mark.unit


def test_reads_row_major(internal_config, example_lines):
    """Row labels are outer keys, header labels inner keys."""
    table, header = TableReader(internal_config).read(example_lines)

    assert header == ["-", "a", "b", "c"]
    assert list(table) == ["d", "e", "f"]
    assert table["d"] == {"a": "1", "b": "-", "c": "0"}
    assert table["f"]["c"] == "3"


def test_reads_column_major(make_config, example_lines):
    """Column-major swaps the key roles."""
    table, _ = TableReader(make_config(orientation="col")).read(example_lines)

    assert list(table) == ["a", "b", "c"]
    assert table["a"] == {"d": "1", "e": "2", "f": "1"}
    assert table["b"]["d"] == "-"


def test_field_count_mismatch_raises(internal_config):
    lines = ["- a b", "c 1 2", "d 3"]

    with pytest.raises(FormatError) as exc_info:
        TableReader(internal_config).read(lines)

    assert exc_info.value.line_number == 3
    assert exc_info.value.expected == 3
    assert exc_info.value.found == 2


def test_extra_field_raises(internal_config):
    with pytest.raises(FormatError):
        TableReader(internal_config).read(["- a", "x 1 2"])


def test_comments_skipped_before_and_after_header(internal_config):
    lines = [
        "# produced by a tool\n",
        "   # indented comment\n",
        "- a b\n",
        "# between rows\n",
        "x 1 2\n",
    ]
    table, header = TableReader(internal_config).read(lines)

    assert header == ["-", "a", "b"]
    assert table == {"x": {"a": "1", "b": "2"}}


def test_blank_lines_skipped(internal_config):
    table, _ = TableReader(internal_config).read(["- a\n", "\n", "x 1\n", "   \n"])
    assert table == {"x": {"a": "1"}}


def test_whitespace_runs_split(internal_config):
    table, _ = TableReader(internal_config).read(["  -\ta    b\n", "x  1\t\t2  \n"])
    assert table == {"x": {"a": "1", "b": "2"}}


def test_tab_delimiter_keeps_spaces_in_fields(make_config):
    lines = ["-\tcol one\tcol two\n", "row one\t1 2\t3\n"]
    table, _ = TableReader(make_config(delimiter="tab")).read(lines)

    assert table == {"row one": {"col one": "1 2", "col two": "3"}}


def test_whitespace_only_line_is_a_row_with_explicit_delimiter(make_config):
    table, _ = TableReader(make_config(delimiter="tab")).read(["-\ta\tb\n", "\t\t\n"])
    assert table == {"": {"a": "", "b": ""}}


def test_whitespace_only_line_with_explicit_delimiter_is_checked(make_config):
    with pytest.raises(FormatError, match="line 2"):
        TableReader(make_config(delimiter=",")).read(["-,a,b\n", "   \n"])


def test_empty_line_skipped_with_explicit_delimiter(make_config):
    table, _ = TableReader(make_config(delimiter=",")).read(["-,a\n", "\n", "x,1\r\n", "\r\n"])
    assert table == {"x": {"a": "1"}}


def test_explicit_delimiter_keeps_empty_fields(make_config):
    table, _ = TableReader(make_config(delimiter=",")).read(["-,a,b\n", "x,,2\r\n"])
    assert table == {"x": {"a": "", "b": "2"}}


def test_multi_character_delimiter(make_config):
    table, _ = TableReader(make_config(delimiter="::")).read(["-::a::b", "x::1::2"])
    assert table == {"x": {"a": "1", "b": "2"}}


def test_duplicate_row_label_last_write_wins(internal_config):
    """A repeated row overwrites values but keeps its first position."""
    lines = ["- a b", "x 1 2", "y 3 4", "x 5 6"]
    table, _ = TableReader(internal_config).read(lines)

    assert list(table) == ["x", "y"]
    assert table["x"] == {"a": "5", "b": "6"}


def test_duplicate_header_label_last_write_wins(internal_config):
    table, _ = TableReader(internal_config).read(["- a a", "x 1 2"])
    assert table == {"x": {"a": "2"}}


def test_empty_input(internal_config):
    table, header = TableReader(internal_config).read([])
    assert table == {}
    assert header == []


def test_header_only(internal_config):
    table, header = TableReader(internal_config).read(["# comment", "- a b"])
    assert table == {}
    assert header == ["-", "a", "b"]
