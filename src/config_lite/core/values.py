"""Value conversion and rendering helpers for the INI text format."""

from __future__ import annotations

import re
from collections.abc import Mapping

BOOLEAN_TOKENS: dict[str, bool] = {
    "1": True,
    "on": True,
    "true": True,
    "yes": True,
    "0": False,
    "off": False,
    "false": False,
    "no": False,
}

_ESCAPE_RE = re.compile(r"[\\'\"\x00]")
_UNESCAPE_RE = re.compile(r"\\(.?)", re.DOTALL)


def escape(value) -> str:
    """Backslash-escape quotes, backslashes and NUL characters."""
    if value is None:
        return ""

    def _sub(match: re.Match) -> str:
        char = match.group(0)
        return "\\0" if char == "\x00" else "\\" + char

    return _ESCAPE_RE.sub(_sub, str(value))


def unescape(value: str) -> str:
    """Undo escape(): drop escaping backslashes, ``\\0`` becomes NUL."""

    def _sub(match: re.Match) -> str:
        char = match.group(1)
        return "\x00" if char == "0" else char

    return _UNESCAPE_RE.sub(_sub, value)


def parse_bool(value) -> bool | None:
    """Map a stored value to a bool, or None if it is not a boolean token."""
    if isinstance(value, bool):
        return value
    return BOOLEAN_TOKENS.get(str(value).lower())


def format_bool(value: bool) -> str:
    return "yes" if value is True else "no"


def render_value(value) -> str:
    """Render a value as it appears on the right of ``key = ``."""
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, str):
        # Embedded quotes are not escaped here, see set_string()
        return f'"{value}"'
    if value is None:
        return ""
    return str(value)


def render_sections(sections: Mapping | None) -> str:
    """Render sections as INI text.

    Each section is preceded by a blank line; keys keep insertion order.
    Entries whose value is not a mapping are skipped.
    """
    if not sections:
        return ""
    lines = []
    for section, items in sections.items():
        if not isinstance(items, Mapping):
            continue
        lines.append(f"\n[{section}]\n")
        for key, value in items.items():
            lines.append(f"{key} = {render_value(value)}\n")
    return "".join(lines)
