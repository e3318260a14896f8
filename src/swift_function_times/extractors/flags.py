"""Detection of the compiler flag that enables per-function timing output."""

from __future__ import annotations

COMPILER_FLAG = "-debug-time-function-bodies"


def has_compiler_flag(command_desc: str, flag: str = COMPILER_FLAG) -> bool:
    """Return True when the invocation text mentions the timing flag anywhere.

    This is a plain substring check: the flag is not required to sit on an
    argument boundary, so ``-Xfrontend -debug-time-function-bodies`` and a
    quoted ``"-debug-time-function-bodies"`` both count.
    """

    return flag in command_desc
