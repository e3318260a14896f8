from __future__ import annotations

import pytest

COMMAND_PREFIX = (
    "CompileSwift normal arm64 /Users/a/b.swift (in target 'App' from project 'App')\r"
    "    swiftc -frontend -c -primary-file /Users/a/b.swift -Xfrontend -debug-time-function-bodies\r"
)


def timing_line(duration: str, location: str, signature: str) -> str:
    return f"\t{duration}ms\t{location}\t{signature}\r"


@pytest.fixture()
def flagged_command() -> str:
    return (
        COMMAND_PREFIX
        + timing_line("12.34", "/Users/a/b.swift:10:5", "foo(_:)")
        + timing_line("0.08", "/Users/a/b.swift:22:17", "get {}")
        + timing_line("3.50", "/Users/a/c.swift:4:1", "init(name:)")
    )


@pytest.fixture()
def invalid_location_command() -> str:
    return COMMAND_PREFIX + timing_line("12.34", "<invalid loc>", "foo(_:)")
