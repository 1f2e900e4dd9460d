#!/usr/bin/env python
# PYTHON_ARGCOMPLETE_OK
'''
The main entry for the pyenum package to allow it to run as a command-line tool.
'''
import sys
import argparse

from typing import Dict, List, Text, Union

from . import create_enum
from .utils import decompose, keys, pretty_print, tree

try:
    import argcomplete
except ImportError:
    pass

DEFINITION_SEP = '='


def parse_number(raw_value: Text) -> Union[int, float]:
    '''
    Parse an enum value: an int in any base Python accepts (``10``, ``0x10``, ``0b10``) or a float.
    '''
    try:
        return int(raw_value, 0)
    except ValueError:
        return float(raw_value)


def parse_int(raw_value: Text) -> int:
    '''
    Parse a flags value: an int in any base Python accepts.
    '''
    return int(raw_value, 0)


def parse_definition(definitions: List[Text]) -> Union[List[Text], Dict[Text, Union[int, float]]]:
    '''
    Convert command-line definitions into an enum definition.

    Either all definitions are plain keys (``A B C``, numbered as flags) or all of them are
    ``KEY=VALUE`` pairs.
    '''
    with_values = [DEFINITION_SEP in definition for definition in definitions]
    if not any(with_values):
        return list(definitions)
    if not all(with_values):
        raise ValueError("definitions must be either all KEY or all KEY=VALUE.")

    mapping = {}
    for definition in definitions:
        key, raw_value = definition.split(DEFINITION_SEP, 1)
        mapping[key] = parse_number(raw_value)
    return mapping


def handle_print(args, enum):
    '''
    Handle the `print` subparser.
    '''
    if args.tree:
        tree(enum)
    else:
        pretty_print(enum)

    return True


def handle_get(args, enum):
    '''
    Handle the `get` subparser.
    '''
    found = True
    for probe_type, probe in args.probes or []:
        item = enum.get(probe)
        if item is None:
            found = False
            print(f'{probe_type} {probe!r} not found in {enum}', file=sys.stderr)
            continue

        if args.show_names:
            print(f'{probe}=', end="")
        print(item)

    return found


def handle_flags(args, enum):
    '''
    Handle the `flags` subparser.
    '''
    print(' | '.join(keys(decompose(enum, args.value))))
    return True


class AppendWithName(argparse.Action):  # pylint: disable=too-few-public-methods
    '''
    Action that appends the given flag values to a list in a tuple with the flag name.

    f.e. when using `program --flag1 val1 --flag2 val2 --flag1 val3`,
    The result list will contain: [("flag1", val1), ("flag2", val2), ("flag1", val3)]
    '''

    def __call__(self, parser, namespace, values, option_string=None):
        items = getattr(namespace, self.dest, None)
        items = [] if items is None else items[:]
        items.append((option_string.lstrip(parser.prefix_chars), values))
        setattr(namespace, self.dest, items)


def create_parser() -> argparse.ArgumentParser:
    '''
    Create pyenum's argument parser.
    '''
    parser = argparse.ArgumentParser(description="A command-line tool for building and querying enums")
    subparsers = parser.add_subparsers(dest="command", required=True)

    base_parser = argparse.ArgumentParser(add_help=False)
    base_parser.add_argument('name', help="The name of the enum")
    base_parser.add_argument('definitions', metavar='definition', nargs='+',
                             help="Either KEY (numbered as bit flags) or KEY=VALUE")

    print_parser = subparsers.add_parser('print', parents=[base_parser], help="Print the enum in a human readable form")
    print_parser.add_argument('--tree', action='store_true', help="Print the enum in a tree-like format")
    print_parser.set_defaults(cmd=handle_print)

    get_parser = subparsers.add_parser('get', parents=[base_parser], help="Get the items for given keys or values")
    get_parser.add_argument('--key', action=AppendWithName, dest='probes',
                            help="A requested key")
    get_parser.add_argument('--value', action=AppendWithName, dest='probes', type=parse_number,
                            help="A requested value")
    get_parser.add_argument('--hide-names', action='store_false', dest='show_names',
                            help="Hide the requested keys / values")
    get_parser.set_defaults(cmd=handle_get)

    flags_parser = subparsers.add_parser('flags', parents=[base_parser], help="Get the flags set in a value")
    flags_parser.add_argument('--value', type=parse_int, required=True, help="The combined flags value")
    flags_parser.set_defaults(cmd=handle_flags)

    return parser


def main(argv: List[Text] = None):
    '''
    pyenum's main entrypoint.
    '''
    parser = create_parser()

    if 'argcomplete' in sys.modules:
        argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)
    try:
        enum = create_enum(args.name, parse_definition(args.definitions))
    except ValueError as err:
        parser.error(str(err))
    success = args.cmd(args, enum)
    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
