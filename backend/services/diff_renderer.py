"""
Diff Renderer Service - Row layout for the side-by-side view
"""

from __future__ import annotations

from typing import Iterable

from models.diff import DiffEntry, DiffKind, SideBySideRow
from services.diff_engine import split_lines


def _flush_gap(
    rows: list[SideBySideRow],
    removed: list[DiffEntry],
    added: list[DiffEntry],
) -> None:
    """Pair pending removals with pending additions, leftovers stay one-sided"""
    for index in range(max(len(removed), len(added))):
        left = removed[index] if index < len(removed) else None
        right = added[index] if index < len(added) else None

        if left is not None and right is not None:
            row_type = "modified"
        elif left is not None:
            row_type = "removed"
        else:
            row_type = "added"

        rows.append(
            SideBySideRow(
                row_type=row_type,
                left_line_number=left.source_line_number if left is not None else None,
                left_content=left.content if left is not None else None,
                right_line_number=right.source_line_number if right is not None else None,
                right_content=right.content if right is not None else None,
            )
        )

    removed.clear()
    added.clear()


def build_side_by_side(entries: Iterable[DiffEntry], modified: str) -> list[SideBySideRow]:
    """
    Lay entries out as two columns, original on the left and modified on the right.

    Unchanged entries only carry the original side's text, so the right column
    reads its text from the modified input. Under ignore-case or
    ignore-whitespace the two sides of an unchanged row can differ.
    """
    modified_lines = split_lines(modified)
    rows: list[SideBySideRow] = []
    removed: list[DiffEntry] = []
    added: list[DiffEntry] = []
    right_number = 0

    for entry in entries:
        if entry.kind == DiffKind.REMOVED:
            removed.append(entry)
        elif entry.kind == DiffKind.ADDED:
            right_number = entry.source_line_number
            added.append(entry)
        else:
            _flush_gap(rows, removed, added)
            right_number += 1
            rows.append(
                SideBySideRow(
                    row_type="unchanged",
                    left_line_number=entry.source_line_number,
                    left_content=entry.content,
                    right_line_number=right_number,
                    right_content=modified_lines[right_number - 1],
                )
            )

    _flush_gap(rows, removed, added)
    return rows
