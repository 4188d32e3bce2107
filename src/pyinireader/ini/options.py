# -*- encoding: utf-8 -*-
# @File   : options.py
# @Time   : 2026/10/17 20:11:02
# @Author : Kariko Lin

"""Parser toggles.

They used to be compile-time switches. Here they are plain values,
which may also come from a YAML file like:

    ```yaml
    allow_inline_comments: false
    start_comment_prefixes: "#"
    max_key_length: 32
    ```
"""

from dataclasses import dataclass, fields, replace
from os import PathLike
from typing import Any, Self

import yaml

from .consts import (
    INLINE_COMMENT_PREFIXES,
    MAX_KEY_LENGTH,
    MAX_LINE_LENGTH,
    MAX_SECTION_LENGTH,
    START_COMMENT_PREFIXES
)


@dataclass(frozen=True, kw_only=True)
class ParserOptions:
    allow_multiline: bool = True  # reserved, multiline values are not parsed
    allow_comments: bool = True
    allow_inline_comments: bool = True
    stop_on_first_error: bool = True
    start_comment_prefixes: str = START_COMMENT_PREFIXES
    inline_comment_prefixes: str = INLINE_COMMENT_PREFIXES
    # `None` means unlimited.
    max_section_length: int | None = None
    max_key_length: int | None = None
    max_line_length: int | None = None

    def __post_init__(self) -> None:
        if not self.stop_on_first_error:
            raise ValueError(
                'Collecting several errors is not supported, '
                'parsing always stops at the first one.')
        for i in ('max_section_length', 'max_key_length', 'max_line_length'):
            limit = getattr(self, i)
            if limit is not None and limit < 1:
                raise ValueError(f'{i} must be positive, got {limit}.')

    @classmethod
    def limited(cls, **overrides: Any) -> Self:
        """Options enforcing the classic 50/50/200 length limits."""
        return replace(
            cls(
                max_section_length=MAX_SECTION_LENGTH,
                max_key_length=MAX_KEY_LENGTH,
                max_line_length=MAX_LINE_LENGTH),
            **overrides)

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> Self:
        if not data:
            return cls()
        known = {i.name for i in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f'Unknown parser options: {sorted(unknown)}')
        return cls(**data)

    @classmethod
    def from_yaml(
        cls, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> Self:
        with open(filename, 'r', encoding=encoding) as fp:
            data = yaml.safe_load(fp)
        if data is not None and not isinstance(data, dict):
            raise ValueError(
                f'{filename}: expected a mapping of options, '
                f'got {type(data).__name__}.')
        return cls.from_mapping(data)
