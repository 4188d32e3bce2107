# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/17 20:05:40
# @Author : Kariko Lin

from enum import Enum


START_COMMENT_PREFIXES = ';#'
INLINE_COMMENT_PREFIXES = ';'

# historical limits, only enforced through `ParserOptions.limited()`.
MAX_SECTION_LENGTH = 50
MAX_KEY_LENGTH = 50
MAX_LINE_LENGTH = 200

TRUE_LITERALS = frozenset(('true', 'yes', 'on', '1'))
FALSE_LITERALS = frozenset(('false', 'no', 'off', '0'))


class ErrorCode(int, Enum):
    """Kinds of failure a parse may end with.

    The first one met halts the parse, so a reader holds one at most.
    """
    NONE = 0
    NO_SUCH_FILE = 1
    NO_CLOSING_BRACKET = 2
    EMPTY_SECTION = 3
    KEY_OUTSIDE_SECTION = 4
    NO_VALUE_FOR_KEY = 5
    NO_CLOSING_QUOTATION = 6
    LINE_TOO_LONG = 7
    SECTION_TOO_LONG = 8
    KEY_TOO_LONG = 9

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.NONE: 'No error has occurred.',
    ErrorCode.NO_SUCH_FILE: 'File does not exist.',
    ErrorCode.NO_CLOSING_BRACKET: 'No closing bracket found for section.',
    ErrorCode.EMPTY_SECTION: 'Section has no key-value pairs.',
    ErrorCode.KEY_OUTSIDE_SECTION:
        'Key-value pair was found outside a section.',
    ErrorCode.NO_VALUE_FOR_KEY: 'No value found for key.',
    ErrorCode.NO_CLOSING_QUOTATION: 'No closing double quotes for value.',
    ErrorCode.LINE_TOO_LONG: 'Line exceeds the maximum length.',
    ErrorCode.SECTION_TOO_LONG: 'Section name exceeds the maximum length.',
    ErrorCode.KEY_TOO_LONG: 'Key exceeds the maximum length.',
}
