"""Per-function compile time extraction for swiftc build logs."""

from .parser import (
    SwiftFunctionTimeParser,
    build_default_parser,
    count_invocations,
    select_flagged_commands,
)
from .schemas import FunctionTimeRecord

__all__ = [
    "FunctionTimeRecord",
    "SwiftFunctionTimeParser",
    "build_default_parser",
    "count_invocations",
    "select_flagged_commands",
]
