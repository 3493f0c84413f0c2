"""Configuration for Config Lite"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

PHP_EXIT_GUARD = ";<?php exit; ?>"


def _split_suffixes(raw: str) -> tuple[str, ...]:
    return tuple(s.strip().lower() for s in raw.split(",") if s.strip())


class Config:
    """Minimal configuration"""

    # Write guard, e.g. CONFIG_LITE_GUARDED_SUFFIXES=".php"
    GUARDED_SUFFIXES = _split_suffixes(os.getenv("CONFIG_LITE_GUARDED_SUFFIXES", ""))
    GUARD_LINE = os.getenv("CONFIG_LITE_GUARD_LINE", PHP_EXIT_GUARD)

    # File I/O
    ENCODING = os.getenv("CONFIG_LITE_ENCODING", "utf-8")

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


config = Config()


@dataclass(frozen=True)
class WriteGuard:
    """Leading line written to paths whose suffix is on the denylist.

    Attributes:
        suffixes: Lower-cased suffixes (".php") that receive the guard line
        line: Guard text, written followed by a newline. A line that does
              not start with ";" or "#" is written with a leading ";" so
              the file still parses.
    """

    suffixes: tuple[str, ...] = ()
    line: str = PHP_EXIT_GUARD

    def applies_to(self, path) -> bool:
        """Check if the guard line must be prepended when writing to path."""
        name = os.fspath(path).lower()
        return any(name.endswith(suffix) for suffix in self.suffixes)

    @property
    def comment_line(self) -> str:
        """Guard line as written, always an INI comment."""
        if self.line.startswith((";", "#")):
            return self.line
        return ";" + self.line

    @classmethod
    def from_config(cls) -> "WriteGuard":
        return cls(suffixes=config.GUARDED_SUFFIXES, line=config.GUARD_LINE)

    @classmethod
    def php(cls) -> "WriteGuard":
        """Guard matching the classic PHP hosting setup."""
        return cls(suffixes=(".php",), line=PHP_EXIT_GUARD)
