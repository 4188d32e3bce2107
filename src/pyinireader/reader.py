# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2026/10/17 20:52:06
# @Author : Kariko Lin

"""Typed access to a parsed INI file.

A failed parse never raises here; check `success()` first,
though the getters keep answering from whatever got parsed.
"""

import logging
from os import PathLike
from re import ASCII
from re import compile as regex
from typing import Callable, TypeVar

from .ini.consts import FALSE_LITERALS, TRUE_LITERALS, ErrorCode
from .ini.model import Field, IniStore
from .ini.options import ParserOptions
from .ini.parser import IniParser, IniSyntaxError

logger = logging.getLogger(__name__)

N = TypeVar('N', int, float)

# plain base-10 text only.
_INT_PATTERN = regex(r'[+-]?[0-9]+', ASCII)
_FLOAT_PATTERN = regex(
    r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?', ASCII)


class IniReader:
    def __init__(
        self, filename: str | PathLike[str],
        options: ParserOptions | None = None,
        encoding: str | None = None
    ) -> None:
        """Read and parse `filename` at once."""
        self._parser = IniParser(filename, encoding, options)
        self._error = ErrorCode.NONE
        self._error_line: int | None = None
        try:
            self._store = self._parser.read()
        except OSError as e:
            logger.warning(f"INI file not readable: {self._parser}\n  {e}")
            self._store = IniStore()
            self._error = ErrorCode.NO_SUCH_FILE
        except IniSyntaxError as e:
            logger.warning(f"INI parse stopped in {self._parser.filename}: {e}")
            self._store = e.store
            self._error = e.code
            self._error_line = e.line_num

    @property
    def store(self) -> IniStore:
        return self._store

    @property
    def error(self) -> ErrorCode:
        return self._error

    @property
    def error_line(self) -> int | None:
        """Line the parse stopped at, if it stopped on a line."""
        return self._error_line

    def success(self) -> bool:
        return self._error is ErrorCode.NONE

    def get_error(self) -> str:
        return self._error.message

    def get(self, section: str, key: str) -> str | None:
        return self._store.lookup(section, key)

    def get_string(self, section: str, key: str, default: str) -> str:
        """Note: an empty value counts as missing, and so gets `default`."""
        return self.get(section, key) or default

    def __get_number(
        self, section: str, key: str, default: N, converter: Callable[[str], N]
    ) -> N:
        raw = self.get(section, key)
        if not raw:
            return default
        # python's own spellings like `1_000` or `inf` are not accepted.
        pattern = _INT_PATTERN if converter is int else _FLOAT_PATTERN
        try:
            if not pattern.fullmatch(raw):
                raise ValueError(raw)
            return converter(raw)
        except ValueError:
            logger.warning(
                f"[{section}] {key}={raw} is not a valid "
                f"{converter.__name__}, using {default!r}.")
            return default

    def get_int(self, section: str, key: str, default: int) -> int:
        return self.__get_number(section, key, default, int)

    def get_long(self, section: str, key: str, default: int) -> int:
        # python ints are unbounded, kept for API parity with get_int.
        return self.__get_number(section, key, default, int)

    def get_double(self, section: str, key: str, default: float) -> float:
        return self.__get_number(section, key, default, float)

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        raw = (self.get(section, key) or '').lower()
        if raw in TRUE_LITERALS:
            return True
        if raw in FALSE_LITERALS:
            return False
        return default

    def get_section_names(self) -> set[str]:
        return self._store.section_names

    def get_section_fields(self, section: str) -> list[Field]:
        """Fields of `section` in key order.

        Raises:
            KeyError: if no such section was parsed.
        """
        return self._store[section].fields()

    def __repr__(self) -> str:
        return f'<IniReader {self._parser.filename!r}: {self._error.name}>'
