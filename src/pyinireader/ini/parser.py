# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/17 20:34:18
# @Author : Kariko Lin

"""Line-oriented INI reading.

Each line (trailing whitespace stripped) is one of, in this order:

1. blank, ignored;
2. start-of-line comment, ignored;
3. section header `[name]`;
4. pair `key = value`, where a value in double quotes is kept verbatim
   and an unquoted one loses its inline comment.

Only the very first character is inspected for 2 and 3,
so an indented `[name]` or `; comment` is treated as a pair.
The first malformed line stops everything.
"""

import logging
from dataclasses import dataclass
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from .consts import ErrorCode
from .model import IniSection, IniStore
from .options import ParserOptions
from ..abstract import FileHandler

logger = logging.getLogger(__name__)


class IniSyntaxError(Exception):
    """To record the first error met when reading INI files.

    `store` keeps whatever had been parsed before the failing line.
    """
    def __init__(
        self, code: ErrorCode, line_num: int | None,
        store: IniStore | None = None
    ) -> None:
        super().__init__(code.message)
        self.code = code
        self.line_num = line_num
        self.store = store if store is not None else IniStore()

    def __str__(self) -> str:
        if self.line_num is None:
            return self.code.message
        return f'line {self.line_num}: {self.code.message}'


@dataclass
class ParseState:
    store: IniStore
    options: ParserOptions
    section: IniSection | None = None  # `None` until the first header
    line_num: int = 1

    def fail(self, code: ErrorCode) -> IniSyntaxError:
        return IniSyntaxError(code, self.line_num, self.store)


def _too_long(text: str, limit: int | None) -> bool:
    return limit is not None and len(text) > limit


def _check_no_empty_sections(state: ParseState) -> None:
    if empty := state.store._empty_sections():
        logger.debug('Empty section(s) before line %d: %s',
                     state.line_num, empty)
        raise state.fail(ErrorCode.EMPTY_SECTION)


def _strip_inline_comment(val: str, prefixes: str) -> str:
    cut = min(
        (i for i in map(val.find, prefixes) if i != -1),
        default=-1)
    return val if cut == -1 else val[:cut].rstrip()


def _parse_section(line: str, state: ParseState) -> None:
    # the previous section must have got at least one pair.
    _check_no_empty_sections(state)

    closing = line.find(']')
    if closing == -1:
        raise state.fail(ErrorCode.NO_CLOSING_BRACKET)

    name = line[1:closing].rstrip()
    if _too_long(name, state.options.max_section_length):
        raise state.fail(ErrorCode.SECTION_TOO_LONG)
    state.section = state.store._open_section(name)


def _parse_pair(key: str, val: str, state: ParseState) -> None:
    if state.section is None:
        raise state.fail(ErrorCode.KEY_OUTSIDE_SECTION)

    key, val = key.strip(), val.strip()
    if _too_long(key, state.options.max_key_length):
        raise state.fail(ErrorCode.KEY_TOO_LONG)
    if not val:
        raise state.fail(ErrorCode.NO_VALUE_FOR_KEY)

    if val[0] == '"':
        closing = val.rfind('"')
        if closing <= 0:
            raise state.fail(ErrorCode.NO_CLOSING_QUOTATION)
        val = val[1:closing]
    elif state.options.allow_inline_comments:
        val = _strip_inline_comment(
            val, state.options.inline_comment_prefixes)

    state.section._put(key, val)


def _parse_line(line: str, state: ParseState) -> None:
    if not line:
        return
    if (state.options.allow_comments
            and line[0] in state.options.start_comment_prefixes):
        return
    # comments never count toward the limit.
    if _too_long(line, state.options.max_line_length):
        raise state.fail(ErrorCode.LINE_TOO_LONG)
    if line[0] == '[':
        return _parse_section(line, state)

    if '=' not in line:
        raise state.fail(ErrorCode.NO_VALUE_FOR_KEY)
    key, val = line.split('=', 1)
    _parse_pair(key, val, state)


class IniParser(FileHandler[IniStore]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None,
        options: ParserOptions | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._options = options if options is not None else ParserOptions()

    @property
    def options(self) -> ParserOptions:
        return self._options

    @staticmethod
    def readstream(
        buf: TextIOBase, options: ParserOptions | None = None
    ) -> IniStore:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。

        Raises:
            IniSyntaxError: on the first malformed line.
        """
        state = ParseState(
            IniStore(), options if options is not None else ParserOptions())
        while i := buf.readline():
            if state.line_num == 1:
                # utf-8 BOM survives a plain `utf-8` decode.
                i = i.lstrip('\ufeff')
            _parse_line(i.rstrip(), state)
            # never moves past a failing line.
            state.line_num += 1
        _check_no_empty_sections(state)
        return state.store

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}
        logger.info('Decoding %s as %s', filename, codec['encoding'])

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(self) -> IniStore:
        """读取`IniParser`实例指定的文件。

        Raises:
            OSError: when the file cannot be opened.
            IniSyntaxError: on the first malformed line.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp, self._options)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(self._fn), self._options)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
