"""Error taxonomy for Config Lite.

Every exception raised by the library derives from ConfigLiteError and
carries an ErrorKind, so callers can branch on either the class or
``exc.kind``.
"""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """Closed set of failure categories."""

    NOT_FOUND = auto()  # load path does not exist
    PARSE = auto()  # INI grammar rejected the text
    WRITE = auto()  # open-for-write or write failed
    NO_PATH = auto()  # save() without an established path
    EMPTY_CONFIG = auto()  # accessor on a never loaded store
    KEY_NOT_FOUND = auto()
    SECTION_NOT_FOUND = auto()
    INVALID_BOOLEAN = auto()
    INVALID_ARGUMENT = auto()
    UNKNOWN_FORMAT = auto()


class ConfigLiteError(Exception):
    """Base class for all Config Lite errors."""

    kind: ErrorKind


class NotFoundError(ConfigLiteError):
    kind = ErrorKind.NOT_FOUND


class ParseError(ConfigLiteError):
    kind = ErrorKind.PARSE


class WriteError(ConfigLiteError):
    kind = ErrorKind.WRITE


class NoPathError(ConfigLiteError):
    kind = ErrorKind.NO_PATH


class EmptyConfigError(ConfigLiteError):
    kind = ErrorKind.EMPTY_CONFIG


class KeyNotFoundError(ConfigLiteError, LookupError):
    kind = ErrorKind.KEY_NOT_FOUND


class SectionNotFoundError(ConfigLiteError, LookupError):
    kind = ErrorKind.SECTION_NOT_FOUND


class InvalidBooleanError(ConfigLiteError, ValueError):
    kind = ErrorKind.INVALID_BOOLEAN


class InvalidArgumentError(ConfigLiteError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT


class UnknownFormatError(ConfigLiteError, ValueError):
    kind = ErrorKind.UNKNOWN_FORMAT

