"""Text diff API endpoints"""

from __future__ import annotations

from typing import Any, Iterator

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from sse_starlette.sse import EventSourceResponse

from models.diff import (
    CompareRequest,
    CompareResponse,
    DiffEntry,
    DiffOptions,
    DiffStreamEvent,
    ParseExportRequest,
    SampleTexts,
    SideBySideResponse,
)
from services.config_manager import ConfigManager
from services.diff_engine import DiffEngine, DiffInputTooLargeError, compare_texts, summarize
from services.diff_exporter import (
    EXPORT_FILENAME,
    EXPORT_MEDIA_TYPE,
    DiffFormatError,
    export_unified_text,
    parse_unified_text,
)
from services.diff_renderer import build_side_by_side
from services.sample_texts import get_sample_texts

router = APIRouter()


def resolve_options(request: CompareRequest, config: dict[str, Any]) -> DiffOptions:
    """Use the request options, or the configured defaults when none are given"""
    if request.options is not None:
        return request.options

    diff_config = config["diff"]
    return DiffOptions(
        ignore_case=diff_config["ignoreCase"],
        ignore_whitespace=diff_config["ignoreWhitespace"],
    )


def prepare_compare(request: CompareRequest) -> DiffOptions:
    """Reject empty or oversize input and resolve the options to compare with"""
    config = ConfigManager.get_instance().get_config()

    if config["diff"]["rejectEmptyInput"]:
        if not request.original_text or not request.modified_text:
            raise HTTPException(
                status_code=400, detail="Both original and modified text are required"
            )

    try:
        DiffEngine.from_config(config).check_size(request.original_text, request.modified_text)
    except DiffInputTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))

    return resolve_options(request, config)


def run_compare(request: CompareRequest) -> tuple[DiffEntry, ...]:
    """Validate the request and compute the diff"""
    options = prepare_compare(request)
    return compare_texts(request.original_text, request.modified_text, options)


def iter_diff_events(entries: tuple[DiffEntry, ...]) -> Iterator[dict[str, str]]:
    """Yield SSE payloads: one per entry, then the summary, then done"""
    for entry in entries:
        event = DiffStreamEvent(type="entry", entry=entry)
        yield {"event": "message", "data": event.model_dump_json()}

    event = DiffStreamEvent(type="summary", summary=summarize(entries))
    yield {"event": "message", "data": event.model_dump_json()}

    event = DiffStreamEvent(type="done", done=True)
    yield {"event": "message", "data": event.model_dump_json()}


def stream_diff_events(
    original: str,
    modified: str,
    options: DiffOptions,
) -> Iterator[dict[str, str]]:
    """Compare and yield SSE payloads, reporting a failed comparison as an error event"""
    try:
        entries = compare_texts(original, modified, options)
    except Exception as e:
        print(f"[DiffStream] Comparison failed: {e}")
        event = DiffStreamEvent(type="error", error=str(e))
        yield {"event": "message", "data": event.model_dump_json()}
        return

    yield from iter_diff_events(entries)


@router.post("/compare", response_model=CompareResponse)
async def compare(request: CompareRequest) -> CompareResponse:
    """Compare two texts and return the ordered entries"""
    entries = run_compare(request)
    return CompareResponse(entries=list(entries), summary=summarize(entries))


@router.post("/side-by-side", response_model=SideBySideResponse)
async def side_by_side(request: CompareRequest) -> SideBySideResponse:
    """Compare two texts and return rows for the two-column view"""
    entries = run_compare(request)
    rows = build_side_by_side(entries, request.modified_text)
    return SideBySideResponse(rows=rows, summary=summarize(entries))


@router.post("/stream")
async def compare_stream(request: CompareRequest):
    """Compare two texts and stream the entries (SSE)"""
    options = prepare_compare(request)

    async def event_generator():
        for payload in stream_diff_events(request.original_text, request.modified_text, options):
            yield payload

    return EventSourceResponse(event_generator())


@router.post("/export")
async def export_diff(request: CompareRequest) -> PlainTextResponse:
    """Compare two texts and return the diff as a downloadable text file"""
    entries = run_compare(request)
    config = ConfigManager.get_instance().get_config()
    filename = config["export"]["filename"] or EXPORT_FILENAME

    try:
        content = export_unified_text(entries)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to export diff: {e}")

    return PlainTextResponse(
        content,
        media_type=EXPORT_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/export/parse", response_model=CompareResponse)
async def parse_export(request: ParseExportRequest) -> CompareResponse:
    """Read a previously exported diff back into entries"""
    try:
        entries = parse_unified_text(request.text)
    except DiffFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CompareResponse(entries=list(entries), summary=summarize(entries))


@router.get("/example", response_model=SampleTexts)
async def example() -> SampleTexts:
    """Get the example text pair"""
    return get_sample_texts()
