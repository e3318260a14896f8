"""Duration decoding for the ``<digits>.<digits>ms`` timing field."""

from __future__ import annotations


def parse_compile_duration(duration: str) -> float:
    """Return the duration in milliseconds, or ``0.0`` when it is not a number."""

    try:
        parsed = float(duration)
    except ValueError:
        return 0.0
    return parsed if parsed >= 0 else 0.0
