"""Parser turning ``-debug-time-function-bodies`` output into per-file records."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from time import perf_counter

from .aggregate import build_record, group_by_file
from .config import AppConfig
from .config import config as default_config
from .extractors import COMPILER_FLAG, TimingLineMatcher, default_matcher, has_compiler_flag
from .schemas import FunctionTimeRecord

logger = logging.getLogger("swift_function_times.parser")


class SwiftFunctionTimeParser:
    """Extracts function body compile times from swiftc invocations.

    Timing lines are only printed when the compiler runs with
    ``-Xfrontend -debug-time-function-bodies``. Malformed or location-less
    entries are dropped silently; ``parse`` never raises on compiler text.
    """

    def __init__(
        self,
        matcher: TimingLineMatcher | None = None,
        cfg: AppConfig = default_config,
    ) -> None:
        self._matcher = matcher or default_matcher()
        self._config = cfg

    def has_compiler_flag(self, command_desc: str) -> bool:
        return has_compiler_flag(command_desc)

    def parse(self, commands: Mapping[str, int]) -> dict[str, list[FunctionTimeRecord]]:
        """Return the timed functions found in ``commands``, grouped by file URI.

        ``commands`` maps each invocation text to the number of times it was
        seen in the build log. Within a file, records follow the iteration
        order of ``commands`` and then the textual order of the lines, unless
        ``sort_invocations`` is enabled, in which case invocations are visited
        sorted by their text.
        """

        started_at = perf_counter()
        items = list(commands.items())
        if self._config.sort_invocations:
            items.sort(key=lambda item: item[0])

        records: list[FunctionTimeRecord] = []
        for command, occurrences in items:
            records.extend(self.parse_command(command, occurrences))
        matched_at = perf_counter()

        functions_per_file = group_by_file(records)
        finished_at = perf_counter()

        logger.info(
            "invocations=%d records=%d files=%d match_ms=%.2f aggregate_ms=%.2f total_ms=%.2f",
            len(items),
            len(records),
            len(functions_per_file),
            (matched_at - started_at) * 1000,
            (finished_at - matched_at) * 1000,
            (finished_at - started_at) * 1000,
        )
        return functions_per_file

    def parse_command(self, command: str, occurrences: int) -> list[FunctionTimeRecord]:
        """Return the records for a single invocation, in textual order."""

        records: list[FunctionTimeRecord] = []
        for match in self._matcher.match(command):
            record = build_record(match, occurrences)
            if record is not None:
                records.append(record)
        return records


def build_default_parser() -> SwiftFunctionTimeParser:
    """Return a parser wired with the shared matcher and default options."""

    return SwiftFunctionTimeParser()


def count_invocations(commands: Iterable[str]) -> dict[str, int]:
    """Count identical invocation texts, preserving first-seen order."""

    return dict(Counter(commands))


def select_flagged_commands(commands: Mapping[str, int], flag: str = COMPILER_FLAG) -> dict[str, int]:
    """Keep only the invocations that ran with the function timing flag."""

    return {command: count for command, count in commands.items() if has_compiler_flag(command, flag)}
