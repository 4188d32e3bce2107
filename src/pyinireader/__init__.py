# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/17 19:58:30
# @Author : Kariko Lin

import logging

from .ini import (
    ErrorCode,
    Field,
    IniParser,
    IniSection,
    IniStore,
    IniSyntaxError,
    ParserOptions
)
from .reader import IniReader

__all__ = [
    'IniReader', 'IniParser', 'IniSyntaxError', 'ParserOptions',
    'IniStore', 'IniSection', 'Field', 'ErrorCode'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
