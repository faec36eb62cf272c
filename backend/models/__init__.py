"""Models module - Pydantic data models"""

from .config import SECTION_MODELS, DiffSettings, ExportSettings
from .diff import (
    CompareRequest,
    CompareResponse,
    DiffEntry,
    DiffKind,
    DiffOptions,
    DiffStreamEvent,
    DiffSummary,
    LineRecord,
    ParseExportRequest,
    SampleTexts,
    SideBySideResponse,
    SideBySideRow,
)

__all__ = [
    # Configuration models
    "DiffSettings",
    "ExportSettings",
    "SECTION_MODELS",
    # Core diff models
    "DiffKind",
    "DiffOptions",
    "LineRecord",
    "DiffEntry",
    "DiffSummary",
    "SideBySideRow",
    "SampleTexts",
    # Request/response models
    "CompareRequest",
    "CompareResponse",
    "SideBySideResponse",
    "ParseExportRequest",
    "DiffStreamEvent",
]
