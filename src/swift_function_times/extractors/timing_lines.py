"""Regex matcher for the timing lines printed by ``-debug-time-function-bodies``.

Each timed function is reported on its own carriage-return terminated line::

    \\t12.34ms\\t/path/to/File.swift:10:5\\tfoo(_:)\\r

The duration always carries a fractional part, fields are separated by runs
of tabs, and the location is replaced by ``<invalid loc>`` when the compiler
has no source position for the function.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from ..schemas import TimingMatch

logger = logging.getLogger("swift_function_times.extractors.timing_lines")

INVALID_LOCATION = "<invalid loc>"

TIMING_LINE_PATTERN = (
    r"[\t*|\r]*"
    r"([0-9]+\.[0-9]+)ms\t+"
    rf"({re.escape(INVALID_LOCATION)}|[^\t\r\n]+)\t+"
    r"([^\r\n]+)\r"
)
_REQUIRED_GROUPS = 3


class TimingLineMatcher:
    """Extracts ``(duration, location, signature)`` triples from command output."""

    def __init__(self, pattern: str = TIMING_LINE_PATTERN) -> None:
        self._pattern = pattern
        self._regex = _compile(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def is_available(self) -> bool:
        """False when the pattern could not be compiled; ``match`` then yields nothing."""

        return self._regex is not None

    def match(self, text: str) -> list[TimingMatch]:
        """Return every timing line found in ``text``, in textual order."""

        if self._regex is None:
            return []
        return [
            TimingMatch(
                duration=found.group(1),
                location=found.group(2),
                signature=found.group(3),
            )
            for found in self._regex.finditer(text)
        ]


@lru_cache(maxsize=1)
def default_matcher() -> TimingLineMatcher:
    """Return the process-wide matcher, compiling the pattern on first use."""

    return TimingLineMatcher()


def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        logger.warning("timing pattern failed to compile, no lines will match: %s", exc)
        return None
    if regex.groups < _REQUIRED_GROUPS:
        logger.warning(
            "timing pattern defines %d capture group(s), expected %d; no lines will match",
            regex.groups,
            _REQUIRED_GROUPS,
        )
        return None
    return regex
