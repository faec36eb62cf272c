"""
Diff Exporter Service - Unified-diff-style text for clipboard copy and download
"""

from __future__ import annotations

from typing import Iterable

from models.diff import DiffEntry, DiffKind

EXPORT_FILENAME = "text-diff.txt"
EXPORT_MEDIA_TYPE = "text/plain"

PREFIXES = {
    DiffKind.ADDED: "+ ",
    DiffKind.REMOVED: "- ",
    DiffKind.UNCHANGED: "  ",
}


class DiffFormatError(ValueError):
    """Raised when exported diff text cannot be read back"""

    def __init__(self, line_number: int, line: str):
        super().__init__(f"Line {line_number} has no diff prefix: {line[:40]!r}")
        self.line_number = line_number
        self.line = line


def export_unified_text(entries: Iterable[DiffEntry]) -> str:
    """Render entries as '+ ', '- ' or '  ' prefixed lines joined by newlines"""
    return "\n".join(PREFIXES[entry.kind] + entry.content for entry in entries)


def parse_unified_text(text: str) -> tuple[DiffEntry, ...]:
    """
    Read exported diff text back into entries.

    Line numbers are recomputed from emission order: removed and unchanged lines
    count on the original side, added lines on the modified side.
    """
    if not text:
        return ()

    entries: list[DiffEntry] = []
    original_number = 0
    modified_number = 0

    for index, line in enumerate(text.split("\n"), start=1):
        prefix, content = line[:2], line[2:]

        if prefix == PREFIXES[DiffKind.ADDED]:
            modified_number += 1
            kind, number = DiffKind.ADDED, modified_number
        elif prefix == PREFIXES[DiffKind.REMOVED]:
            original_number += 1
            kind, number = DiffKind.REMOVED, original_number
        elif prefix == PREFIXES[DiffKind.UNCHANGED]:
            original_number += 1
            modified_number += 1
            kind, number = DiffKind.UNCHANGED, original_number
        else:
            raise DiffFormatError(index, line)

        entries.append(DiffEntry(kind=kind, content=content, source_line_number=number))

    return tuple(entries)
