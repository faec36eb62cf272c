"""
Diff Engine Service - Line-level text comparison using LCS alignment
"""

from __future__ import annotations

import re
from typing import Iterable

from models.diff import DiffEntry, DiffKind, DiffOptions, DiffSummary, LineRecord

WHITESPACE_RUN = re.compile(r"\s+")


class DiffInputTooLargeError(ValueError):
    """Raised when an input exceeds the configured line limit"""

    def __init__(self, side: str, line_count: int, max_lines: int):
        super().__init__(
            f"{side} text has {line_count} lines, which exceeds the limit of {max_lines}"
        )
        self.side = side
        self.line_count = line_count
        self.max_lines = max_lines


def split_lines(text: str) -> list[str]:
    """Split text on newline boundaries without trimming a trailing empty line"""
    if not text:
        return []
    return text.split("\n")


def normalize_line(line: str, options: DiffOptions) -> str:
    """Build the comparison basis for a line (case fold, then collapse whitespace)"""
    if options.ignore_case:
        line = line.lower()
    if options.ignore_whitespace:
        line = WHITESPACE_RUN.sub(" ", line).strip()
    return line


def read_lines(text: str, options: DiffOptions) -> list[LineRecord]:
    """Split text into line records carrying both display and comparison text"""
    return [
        LineRecord(line_number=i + 1, content=line, basis=normalize_line(line, options))
        for i, line in enumerate(split_lines(text))
    ]


def _match_pairs(original: list[str], modified: list[str]) -> list[tuple[int, int]]:
    """
    Return index pairs (i, j) of a longest common subsequence.

    Equal leading and trailing runs are matched directly so the O(n*m) table
    only covers the differing middle.
    """
    n, m = len(original), len(modified)

    prefix = 0
    while prefix < n and prefix < m and original[prefix] == modified[prefix]:
        prefix += 1

    suffix = 0
    while (
        suffix < n - prefix
        and suffix < m - prefix
        and original[n - 1 - suffix] == modified[m - 1 - suffix]
    ):
        suffix += 1

    pairs = [(k, k) for k in range(prefix)]

    a = original[prefix:n - suffix]
    b = modified[prefix:m - suffix]
    rows, cols = len(a), len(b)

    if rows and cols:
        # lengths[i][j] holds the LCS length of a[i:] and b[j:]
        lengths = [[0] * (cols + 1) for _ in range(rows + 1)]
        for i in range(rows - 1, -1, -1):
            row = lengths[i]
            below = lengths[i + 1]
            a_line = a[i]
            for j in range(cols - 1, -1, -1):
                if a_line == b[j]:
                    row[j] = below[j + 1] + 1
                elif below[j] >= row[j + 1]:
                    row[j] = below[j]
                else:
                    row[j] = row[j + 1]

        i = j = 0
        while i < rows and j < cols:
            if a[i] == b[j]:
                pairs.append((prefix + i, prefix + j))
                i += 1
                j += 1
            elif lengths[i + 1][j] >= lengths[i][j + 1]:
                i += 1
            else:
                j += 1

    pairs.extend((n - suffix + k, m - suffix + k) for k in range(suffix))
    return pairs


def compare_texts(
    original: str,
    modified: str,
    options: DiffOptions | None = None,
) -> tuple[DiffEntry, ...]:
    """
    Compare two texts line by line.

    Lines shared by the longest common subsequence of the normalized lines are
    emitted as unchanged; everything else is emitted as removed (original side)
    or added (modified side) at the gap where it occurs, removals first.

    Args:
        original: The original text
        modified: The modified text
        options: Normalization switches for the equality test

    Returns:
        Ordered, freshly built tuple of diff entries
    """
    options = options or DiffOptions()
    original_lines = read_lines(original, options)
    modified_lines = read_lines(modified, options)

    pairs = _match_pairs(
        [line.basis for line in original_lines],
        [line.basis for line in modified_lines],
    )

    entries: list[DiffEntry] = []
    i = j = 0
    # Sentinel pair flushes the trailing gap
    for match_i, match_j in [*pairs, (len(original_lines), len(modified_lines))]:
        for record in original_lines[i:match_i]:
            entries.append(
                DiffEntry(
                    kind=DiffKind.REMOVED,
                    content=record.content,
                    source_line_number=record.line_number,
                )
            )
        for record in modified_lines[j:match_j]:
            entries.append(
                DiffEntry(
                    kind=DiffKind.ADDED,
                    content=record.content,
                    source_line_number=record.line_number,
                )
            )
        if match_i < len(original_lines):
            record = original_lines[match_i]
            entries.append(
                DiffEntry(
                    kind=DiffKind.UNCHANGED,
                    content=record.content,
                    source_line_number=record.line_number,
                )
            )
        i, j = match_i + 1, match_j + 1

    return tuple(entries)


def summarize(entries: Iterable[DiffEntry]) -> DiffSummary:
    """Count entries by kind"""
    counts = {kind: 0 for kind in DiffKind}
    for entry in entries:
        counts[entry.kind] += 1

    return DiffSummary(
        added=counts[DiffKind.ADDED],
        removed=counts[DiffKind.REMOVED],
        unchanged=counts[DiffKind.UNCHANGED],
    )


class DiffEngine:
    """Compare texts with a configurable input limit"""

    def __init__(self, max_lines: int = 0):
        self.max_lines = max_lines

    @classmethod
    def from_config(cls, config: dict) -> "DiffEngine":
        """Build an engine from the "diff" section of the configuration"""
        return cls(max_lines=config.get("diff", {}).get("maxLines") or 0)

    def check_size(self, original: str, modified: str) -> None:
        """Reject inputs over the line limit before any table is built"""
        if self.max_lines <= 0:
            return

        for side, text in (("Original", original), ("Modified", modified)):
            line_count = text.count("\n") + 1 if text else 0
            if line_count > self.max_lines:
                print(f"[DiffEngine] Rejected {side.lower()} text: {line_count} lines (limit {self.max_lines})")
                raise DiffInputTooLargeError(side, line_count, self.max_lines)

    def compare(
        self,
        original: str,
        modified: str,
        options: DiffOptions | None = None,
    ) -> tuple[DiffEntry, ...]:
        """Check the input size, then compare"""
        self.check_size(original, modified)
        return compare_texts(original, modified, options)
