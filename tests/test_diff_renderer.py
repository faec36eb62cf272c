"""Tests for the side-by-side row layout."""

from models.diff import DiffOptions
from services.diff_engine import compare_texts
from services.diff_renderer import build_side_by_side
from services.sample_texts import get_sample_texts


def _row_tuples(rows):
    return [
        (r.row_type, r.left_line_number, r.left_content, r.right_line_number, r.right_content)
        for r in rows
    ]


class TestBuildSideBySide:
    """Test pairing entries into two columns."""

    def test_modified_line_is_paired(self):
        """Test that a removal and addition in one gap share a row."""
        modified = "one\ntwo-b\nthree"
        rows = build_side_by_side(compare_texts("one\ntwo\nthree", modified), modified)

        assert _row_tuples(rows) == [
            ("unchanged", 1, "one", 1, "one"),
            ("modified", 2, "two", 2, "two-b"),
            ("unchanged", 3, "three", 3, "three"),
        ]

    def test_insertion_shifts_right_numbers(self):
        """Test that unchanged rows carry the modified-side line number."""
        rows = build_side_by_side(compare_texts("a\nb\nc", "a\nX\nb\nc"), "a\nX\nb\nc")

        assert _row_tuples(rows) == [
            ("unchanged", 1, "a", 1, "a"),
            ("added", None, None, 2, "X"),
            ("unchanged", 2, "b", 3, "b"),
            ("unchanged", 3, "c", 4, "c"),
        ]

    def test_extra_removals_stay_left(self):
        """Test leftover removals after pairing."""
        rows = build_side_by_side(compare_texts("1\n2\n3\nend", "A\nend"), "A\nend")

        assert _row_tuples(rows) == [
            ("modified", 1, "1", 1, "A"),
            ("removed", 2, "2", None, None),
            ("removed", 3, "3", None, None),
            ("unchanged", 4, "end", 2, "end"),
        ]

    def test_sample_texts(self):
        """Test the example pair from the Load Example action."""
        samples = get_sample_texts()
        rows = build_side_by_side(
            compare_texts(samples.original_text, samples.modified_text), samples.modified_text
        )

        assert [r.row_type for r in rows] == [
            "unchanged", "modified", "modified", "added", "unchanged",
        ]
        assert rows[3].right_line_number == 4
        assert rows[-1].left_line_number == 4
        assert rows[-1].right_line_number == 5

    def test_empty(self):
        """Test that no entries give no rows."""
        assert build_side_by_side((), "") == []

    def test_only_additions(self):
        """Test an empty original."""
        rows = build_side_by_side(compare_texts("", "x\ny"), "x\ny")

        assert _row_tuples(rows) == [
            ("added", None, None, 1, "x"),
            ("added", None, None, 2, "y"),
        ]


class TestSideBySideNormalization:
    """Test that each column shows its own side's text."""

    def test_ignore_case_right_column(self):
        """Test a case-only match keeps the modified casing on the right."""
        options = DiffOptions(ignore_case=True)
        rows = build_side_by_side(compare_texts("Hello", "hello", options), "hello")

        assert _row_tuples(rows) == [("unchanged", 1, "Hello", 1, "hello")]

    def test_ignore_whitespace_right_column(self):
        """Test a whitespace-only match keeps the modified spacing on the right."""
        options = DiffOptions(ignore_whitespace=True)
        modified = "intro\n  a b\nnew"
        rows = build_side_by_side(compare_texts("intro\na   b", modified, options), modified)

        assert _row_tuples(rows) == [
            ("unchanged", 1, "intro", 1, "intro"),
            ("unchanged", 2, "a   b", 2, "  a b"),
            ("added", None, None, 3, "new"),
        ]

    def test_right_numbers_after_gap(self):
        """Test right-side lookup stays aligned after additions and removals."""
        options = DiffOptions(ignore_case=True)
        modified = "NEW\nKEEP\nTAIL"
        rows = build_side_by_side(compare_texts("old\nkeep\ntail", modified, options), modified)

        assert _row_tuples(rows) == [
            ("modified", 1, "old", 1, "NEW"),
            ("unchanged", 2, "keep", 2, "KEEP"),
            ("unchanged", 3, "tail", 3, "TAIL"),
        ]
