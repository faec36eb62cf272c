"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DiffKind(str, Enum):
    """Classification of a single diff entry"""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class DiffOptions(BaseModel):
    """Normalization switches applied to the equality test only"""

    model_config = ConfigDict(frozen=True)

    ignore_case: bool = False
    ignore_whitespace: bool = False


class LineRecord(BaseModel):
    """A single input line with its comparison basis"""

    model_config = ConfigDict(frozen=True)

    line_number: int  # 1-indexed
    content: str
    basis: str


class DiffEntry(BaseModel):
    """One line of the diff output"""

    model_config = ConfigDict(frozen=True)

    kind: DiffKind
    content: str
    source_line_number: int  # original side for removed/unchanged, modified side for added


class DiffSummary(BaseModel):
    """Counts of entries by kind"""

    added: int = 0
    removed: int = 0
    unchanged: int = 0

    @property
    def total(self) -> int:
        return self.added + self.removed + self.unchanged

    @property
    def has_changes(self) -> bool:
        return self.added > 0 or self.removed > 0


class SideBySideRow(BaseModel):
    """A row of the two-column view"""

    row_type: str  # "unchanged", "modified", "removed", "added"
    left_line_number: int | None = None
    left_content: str | None = None
    right_line_number: int | None = None
    right_content: str | None = None


class SampleTexts(BaseModel):
    """Example input pair shown by the "Load Example" action"""

    original_text: str
    modified_text: str


class CompareRequest(BaseModel):
    """Request to compare two texts"""

    original_text: str
    modified_text: str
    options: DiffOptions | None = None  # Falls back to configured defaults


class CompareResponse(BaseModel):
    """Response with the ordered diff entries"""

    entries: list[DiffEntry]
    summary: DiffSummary


class SideBySideResponse(BaseModel):
    """Response with rows for the two-column view"""

    rows: list[SideBySideRow]
    summary: DiffSummary


class ParseExportRequest(BaseModel):
    """Request to read back a previously exported diff"""

    text: str


class DiffStreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "entry", "summary", "done", "error"
    entry: DiffEntry | None = None
    summary: DiffSummary | None = None
    done: bool = False
    error: str | None = None
