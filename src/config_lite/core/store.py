"""ConfigStore - read & save INI-style configuration files.

A configuration consists of sections ("[section]") followed by
"name = value" entries. Every entry lives in a section; there is no
global key space.

Usage:
    store = ConfigStore("settings.ini")
    host = store.get("db", "host", "localhost")
    store.set("db", "port", "5432").set("db", "debug", False)
    store.save()
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from ..adapters.ini_parser import ConfigParserAdapter
from ..config import WriteGuard, config
from ..errors import (
    EmptyConfigError,
    InvalidArgumentError,
    InvalidBooleanError,
    KeyNotFoundError,
    NoPathError,
    NotFoundError,
    ParseError,
    SectionNotFoundError,
    UnknownFormatError,
    WriteError,
)
from .ports import IniParser
from .values import escape, format_bool, parse_bool, render_sections, unescape

logger = logging.getLogger(__name__)

_SCALAR_KEY_TYPES = (str, int, float)


class ConfigStore:
    """In-memory section -> key -> value mapping backed by an INI file.

    ``None`` as a default means "no default": accessors raise instead of
    falling back. File locking is not part of this class; concurrent
    writers may overwrite each other.
    """

    def __init__(
        self,
        path: str | os.PathLike | None = None,
        *,
        guard: WriteGuard | None = None,
        parser: IniParser | None = None,
        encoding: str | None = None,
    ):
        """Create a store, loading path right away if it exists.

        Args:
            path: INI file to load. A path that does not exist yet is kept
                  as the target for save().
            guard: Guard line settings for write(); defaults to the
                   environment configuration.
            parser: INI grammar implementation; defaults to configparser.
            encoding: Text encoding for file I/O.
        """
        self._sections: dict[str, dict] | None = None
        self._path: str | None = None
        self._guard = guard if guard is not None else WriteGuard.from_config()
        self._parser = parser if parser is not None else ConfigParserAdapter()
        self._encoding = encoding or config.ENCODING

        if path is not None:
            if os.path.exists(path):
                self.load(path)
            else:
                self._path = os.fspath(path)

    @property
    def path(self) -> str | None:
        """Path used by save(), set by load() or the constructor."""
        return self._path

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self, path: str | os.PathLike) -> None:
        """Replace the whole configuration with the contents of path.

        Raises:
            NotFoundError: path does not exist
            ParseError: the file cannot be read or parsed
        """
        path = os.fspath(path)
        if not os.path.exists(path):
            raise NotFoundError(f"file not found: {path}")

        try:
            with open(path, encoding=self._encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"failure, can not parse the file: {path}") from e

        try:
            sections = self._parser.parse(text)
        except ParseError as e:
            raise ParseError(f"failure, can not parse the file: {path}") from e

        self._sections = {name: dict(items) for name, items in sections.items()}
        self._path = path
        logger.debug("Loaded %d section(s) from %s", len(self._sections), path)

    read = load

    def save(self) -> None:
        """Write the configuration back to the remembered path."""
        if self._path is None:
            raise NoPathError("no file name given, load a file or pass a path first.")
        self.write(self._path, self._sections or {})

    def write(self, path: str | os.PathLike, sections: Mapping) -> None:
        """Write sections to path as INI text, replacing its content.

        A guard line is prepended when the path suffix is on the guard
        denylist. Writing an empty configuration is valid.

        Raises:
            WriteError: the file cannot be opened or written
        """
        path = os.fspath(path)
        content = ""
        if self._guard.applies_to(path):
            content += self._guard.comment_line + "\n"
        content += render_sections(sections)

        try:
            with open(path, "w", encoding=self._encoding) as f:
                f.write(content)
        except OSError as e:
            raise WriteError(f"failed to write file `{path}'") from e
        except UnicodeEncodeError as e:
            raise WriteError(f"failed to encode file `{path}' as {self._encoding}") from e

        logger.debug("Wrote %d byte(s) to %s", len(content), path)

    def to(self, fmt: str, value) -> str:
        """Convert value to its representation in the configuration format.

        Raises:
            UnknownFormatError: fmt is not 'bool' or 'boolean'
        """
        if fmt in ("bool", "boolean"):
            return format_bool(value)
        raise UnknownFormatError(f"no conversion made, unrecognized format `{fmt}'")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def _ensure_loaded(self, default) -> None:
        if self._sections is None and default is None:
            raise EmptyConfigError("configuration seems to be empty, no sections.")

    def _lookup(self, section: str, key: str, default):
        """Return (found, value) for key, honouring the empty-config rule."""
        self._ensure_loaded(default)
        items = (self._sections or {}).get(section)
        key = str(key)
        if items is not None and key in items:
            return True, items[key]
        return False, None

    def get(self, section: str, key: str, default=None):
        """Get the raw stored value.

        Raises:
            EmptyConfigError: nothing loaded and no default given
            KeyNotFoundError: key missing and no default given
        """
        found, value = self._lookup(section, key, default)
        if found:
            return value
        if default is not None:
            return default
        raise KeyNotFoundError(f"key not found, no default value given: [{section}] {key}")

    def get_string(self, section: str, key: str, default=None):
        """Get a value stored with set_string(), backslash escapes removed."""
        found, value = self._lookup(section, key, default)
        if found:
            if value is None:
                return ""
            if isinstance(value, bool):
                return format_bool(value)
            return unescape(str(value))
        if default is not None:
            return default
        raise KeyNotFoundError(f"key not found, no default value given: [{section}] {key}")

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool:
        """Get a boolean; on/yes/true/1 are True, off/no/false/0 are False.

        An empty value is always False.

        Raises:
            EmptyConfigError: nothing loaded and no default given
            InvalidBooleanError: value is not a boolean token and no default given
            KeyNotFoundError: key missing and no default given
        """
        found, value = self._lookup(section, key, default)
        if found:
            if value is None or value == "":
                return False
            result = parse_bool(value)
            if result is not None:
                return result
            if default is not None:
                return default
            raise InvalidBooleanError(
                f"Not a boolean: {str(value).lower()}, and no default value given."
            )
        if default is not None:
            return default
        raise KeyNotFoundError(f"option not found, no default value given: [{section}] {key}")

    def get_section(self, section: str, default: Mapping | None = None) -> dict:
        """Get a copy of all key/value pairs of a section.

        Raises:
            EmptyConfigError: nothing loaded and no default given
            SectionNotFoundError: section missing and no default mapping given
        """
        self._ensure_loaded(default)
        items = (self._sections or {}).get(section)
        if items is not None:
            return dict(items)
        if isinstance(default, Mapping):
            return dict(default)
        raise SectionNotFoundError(f"section not found, no default mapping given: {section}")

    def has(self, section: str, key: str) -> bool:
        if not self.has_section(section):
            return False
        return self._sections[section].get(str(key)) is not None

    def has_section(self, section: str) -> bool:
        return self._sections is not None and section in self._sections

    def sections(self) -> list[str]:
        return list(self._sections or {})

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def _section_for_write(self, section: str, key) -> dict:
        if not isinstance(key, _SCALAR_KEY_TYPES) or isinstance(key, bool):
            raise InvalidArgumentError(
                f"string key expected, but {type(key).__name__} given."
            )
        if self._sections is None:
            self._sections = {}
        return self._sections.setdefault(section, {})

    def set(self, section: str, key: str, value=None) -> "ConfigStore":
        """Add or overwrite a key, creating the section if needed."""
        self._section_for_write(section, key)[str(key)] = value
        return self

    def set_string(self, section: str, key: str, value=None) -> "ConfigStore":
        """Like set(), but backslash-escapes quotes in value first."""
        self._section_for_write(section, key)[str(key)] = escape(value)
        return self

    def set_section(self, section: str, pairs: Mapping) -> "ConfigStore":
        """Replace all key/value pairs of a section."""
        if not isinstance(pairs, Mapping):
            raise InvalidArgumentError(
                f"mapping expected, but {type(pairs).__name__} given."
            )
        if self._sections is None:
            self._sections = {}
        self._sections[section] = {str(k): v for k, v in pairs.items()}
        return self

    def remove(self, section: str, key: str) -> None:
        """Remove a key; a missing key in an existing section is ignored."""
        if not self.has_section(section):
            raise SectionNotFoundError(f"No such Section: {section}")
        self._sections[section].pop(str(key), None)

    def remove_section(self, section: str) -> None:
        if not self.has_section(section):
            raise SectionNotFoundError(f"No such Section: {section}")
        del self._sections[section]

    # ------------------------------------------------------------------
    # Text presentation
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        """Render the configuration like write() does, without a guard line.

        An empty configuration renders as "", but a store that was never
        loaded, set or given a path raises EmptyConfigError.
        """
        if self._sections is None and self._path is None:
            raise EmptyConfigError("Did not read a Configuration File.")
        return render_sections(self._sections)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"ConfigStore(path={self._path!r}, sections={self.sections()!r})"
