"""INI grammar adapter built on the standard library configparser."""

from __future__ import annotations

import configparser

from ..errors import ParseError

# [DEFAULT] is an ordinary section for us, not a fallback for the others
_NO_DEFAULT_SECTION = "\x00config_lite_default"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


class ConfigParserAdapter:
    """Parse INI text with configparser.

    Keys keep their case, values are taken literally (no interpolation),
    duplicate keys or sections are merged with the last value winning and
    a value wrapped in double quotes loses the outer quotes.
    """

    def _new_parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            delimiters=("=",),
            comment_prefixes=(";", "#"),
            strict=False,
            interpolation=None,
            default_section=_NO_DEFAULT_SECTION,
        )
        parser.optionxform = str  # preserve key case
        return parser

    def parse(self, text: str) -> dict[str, dict[str, str]]:
        parser = self._new_parser()
        try:
            parser.read_string(text)
        except configparser.Error as e:
            raise ParseError(f"failure, can not parse the text: {e}") from e

        return {
            section: {
                key: _strip_quotes(value)
                for key, value in parser.items(section, raw=True)
            }
            for section in parser.sections()
        }
