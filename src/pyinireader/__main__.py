# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/17 21:07:45
# @Author : Kariko Lin

"""`python -m pyinireader FILE [SECTION [KEY]]`

Prints section names, the pairs of SECTION, or the value of KEY.
Exits with 1 if the file or the options do not parse, 2 on a missing section or key.
"""

import sys
from argparse import ArgumentParser
from typing import Sequence

import yaml

from .ini.options import ParserOptions
from .reader import IniReader


def _build_argparser() -> ArgumentParser:
    ap = ArgumentParser(prog='pyinireader', description='Read an INI file.')
    ap.add_argument('file', help='INI file to read.')
    ap.add_argument('section', nargs='?')
    ap.add_argument('key', nargs='?')
    ap.add_argument('-e', '--encoding', default=None)
    ap.add_argument('-c', '--options', metavar='YAML', default=None,
                    help='parser options in a YAML file.')
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_argparser().parse_args(argv)
    try:
        options = (ParserOptions.from_yaml(args.options)
                   if args.options else None)
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        print(f'{args.options}: bad parser options: {e}', file=sys.stderr)
        return 1
    reader = IniReader(args.file, options, args.encoding)

    if not reader.success():
        where = f' (line {reader.error_line})' if reader.error_line else ''
        print(f'{args.file}{where}: {reader.get_error()}', file=sys.stderr)
        return 1

    if args.section is None:
        for i in sorted(reader.get_section_names()):
            print(i)
        return 0

    if args.section not in reader.store:
        print(f'No such section: [{args.section}]', file=sys.stderr)
        return 2

    if args.key is None:
        for i in reader.get_section_fields(args.section):
            print(i)
        return 0

    if (value := reader.get(args.section, args.key)) is None:
        print(f'No such key in [{args.section}]: {args.key}', file=sys.stderr)
        return 2
    print(value)
    return 0


if __name__ == '__main__':
    sys.exit(main())
