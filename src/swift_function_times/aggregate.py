"""Record assembly and per-file grouping of function timings."""

from __future__ import annotations

from collections.abc import Iterable

from .extractors import FILE_URL_PREFIX, decode_location, parse_compile_duration, prefix_with_file_url
from .schemas import FunctionTimeRecord, TimingMatch


def build_record(
    match: TimingMatch,
    occurrences: int,
    *,
    file_url_prefix: str = FILE_URL_PREFIX,
) -> FunctionTimeRecord | None:
    """Assemble a record from one matched line, or ``None`` if any field fails to decode."""

    location = decode_location(match.location)
    if location is None:
        return None

    return FunctionTimeRecord(
        file=prefix_with_file_url(location.file_path, file_url_prefix),
        duration_ms=parse_compile_duration(match.duration),
        starting_line=location.line,
        starting_column=location.column,
        signature=match.signature,
        occurrences=occurrences,
    )


def group_by_file(records: Iterable[FunctionTimeRecord]) -> dict[str, list[FunctionTimeRecord]]:
    """Group records by file, keeping the order in which they were produced."""

    grouped: dict[str, list[FunctionTimeRecord]] = {}
    for record in records:
        grouped.setdefault(record.file, []).append(record)
    return grouped
