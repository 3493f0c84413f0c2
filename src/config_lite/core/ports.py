"""Core ports (interfaces) for Config Lite.

The store only depends on these protocols for the INI grammar, so a
different parser can be plugged in without touching the core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IniParser(Protocol):
    """Turns INI text into a section -> key -> value mapping."""

    def parse(self, text: str) -> dict[str, dict[str, str]]:
        """Parse text; raise ParseError when the grammar rejects it."""
