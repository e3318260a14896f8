"""Decoding of ``path:line:column`` location tokens."""

from __future__ import annotations

import logging
import re

from ..schemas import DecodedLocation
from .timing_lines import INVALID_LOCATION

logger = logging.getLogger("swift_function_times.extractors.location")

FILE_URL_PREFIX = "file://"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def decode_location(location: str) -> DecodedLocation | None:
    """Return the file path and position encoded in ``location``.

    ``None`` means the entry must be discarded: the compiler printed the
    invalid-location sentinel, a separator is missing, or the line/column
    are not positive integers.
    """

    if is_invalid_location(location):
        logger.debug("discarding entry with invalid location")
        return None

    split = split_function_location(location)
    if split is None:
        logger.debug("discarding location without a path separator: %r", location)
        return None
    file_path, position = split

    parsed = parse_location(position)
    if parsed is None:
        logger.debug("discarding location with malformed position: %r", location)
        return None
    line, column = parsed

    return DecodedLocation(file_path=file_path, line=line, column=column)


def is_invalid_location(location: str) -> bool:
    return location == INVALID_LOCATION


def split_function_location(location: str) -> tuple[str, str] | None:
    """Split ``location`` on its first colon into ``(file_path, position)``."""

    file_path, separator, position = location.partition(":")
    if not separator:
        return None
    return file_path, position


def parse_location(position: str) -> tuple[int, int] | None:
    """Split ``line:column`` on its first colon and parse both halves."""

    line_text, separator, column_text = position.partition(":")
    if not separator:
        return None
    line = _parse_int(line_text)
    column = _parse_int(column_text)
    if line is None or column is None:
        return None
    if line < 1 or column < 1:
        return None
    return line, column


def prefix_with_file_url(file_path: str, prefix: str = FILE_URL_PREFIX) -> str:
    """Turn a filesystem path into the file URI token used as the grouping key."""

    return f"{prefix}{file_path}"


def _parse_int(value: str) -> int | None:
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)
