# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/17 20:41:53
# @Author : Kariko Lin

from .consts import ErrorCode
from .model import Field, IniSection, IniStore
from .options import ParserOptions
from .parser import IniParser, IniSyntaxError, ParseState
