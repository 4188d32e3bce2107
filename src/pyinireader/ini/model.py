# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/17 20:19:37
# @Author : Kariko Lin

"""
Basically INI Structure: sections of `key = value` pairs, nothing nested.

Both containers are read-only to users. Only `IniParser` fills them,
through the underscored hooks.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Field:
    key: str
    value: str

    # sorted by key only, while equality still takes value into account.
    def __lt__(self, other: 'Field') -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self.key < other.key

    def __str__(self) -> str:
        return f'{self.key}={self.value}'


class IniSection(Mapping[str, str]):
    """键值对字典。同名键后者覆盖前者。"""

    def __init__(self, section_name: str) -> None:
        self._name = section_name
        self.__data: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        return self._name == other._name and self.__data == other.__data

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def fields(self) -> list[Field]:
        """All pairs as `Field`s, in key order."""
        return sorted(Field(k, v) for k, v in self.__data.items())

    def _put(self, key: str, value: str) -> None:
        """for IniParser."""
        self.__data[key] = value


class IniStore(Mapping[str, IniSection]):
    """Section name -> `IniSection`, built once per parse.

        ```ini
        [section]
        key = value     ; inline comment
        quoted = "a ; b"
        ```
    """
    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {}
        # redundant with keys, but enumeration goes through it.
        self.__names: set[str] = set()

    @property
    def section_names(self) -> set[str]:
        return self.__names.copy()

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniStore):
            return NotImplemented
        return self.__sections == other.__sections

    def __repr__(self) -> str:
        return 'IniStore(%s)' % ', '.join(map(repr, self.values()))

    def lookup(self, section: str, key: str) -> str | None:
        """The raw value, or `None` if either section or key is missing."""
        if section not in self.__sections:
            return None
        return self.__sections[section].get(key)

    def _open_section(self, name: str) -> IniSection:
        """for IniParser. Find-or-create, so a repeated header reopens."""
        self.__names.add(name)
        return self.__sections.setdefault(name, IniSection(name))

    def _empty_sections(self) -> list[str]:
        return [k for k, v in self.__sections.items() if not v]
