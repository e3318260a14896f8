"""Caller-facing options for function-time parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    """Immutable parser options, set by the caller rather than the environment."""

    sort_invocations: bool = False


config = AppConfig()
"""Default options: invocations are visited in input order."""
