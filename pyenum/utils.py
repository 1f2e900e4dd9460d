'''
Utilities for working with flag enums and printing enums.
'''
from functools import reduce
from operator import index, or_
from typing import Iterable, List, Text, Union

from .enum import Enum
from .item import EnumItem

_TREE_ITEM = '+--- '
_TREE_LAST = '`--- '


def combine(*flags: Union[EnumItem, int]) -> int:
    '''
    Combine flags (items or plain ints) into a single value using bitwise or.
    Raises TypeError for a flag that is not an integer.
    '''
    return reduce(or_, (index(flag) for flag in flags), 0)


def decompose(enum: Enum, value: Union[EnumItem, int]) -> List[EnumItem]:
    '''
    Gets all items of ``enum`` whose bits are all set in ``value``, in definition order.
    Items with a zero or non-integer value never match. Raises TypeError if ``value`` is not an integer.
    '''
    value = index(value)
    return [item for item in enum.enums
            if isinstance(item.value, int) and item.value and item.value & value == item.value]


def keys(items: Iterable[EnumItem]) -> List[Text]:
    '''
    Gets the keys of ``items``.
    '''
    return [item.key for item in items]


def tree(enum: Enum, indent: Text = ''):
    '''
    Print an enum in a human readable form as a tree.

    @param enum     The enum to print.
    @param indent   An initial indent to give everything. (default: '')
    '''
    print(indent + enum.name, '(enum)')
    for i, item in enumerate(enum.enums):
        prefix = indent + (_TREE_LAST if i == len(enum) - 1 else _TREE_ITEM)
        print(prefix + item.key, '=', repr(item.value))


_PRETTY_PRINT_INDENT = ' ' * 4


def pretty_print(enum: Enum, indent: Text = ''):
    '''
    Print an enum in a human readable form as pseudo code.

    @param enum     The enum to print.
    @param indent   An initial indent to give everything. (default: '')
    '''
    print(indent + 'enum', enum.name, '{')
    for item in enum.enums:
        print(indent + _PRETTY_PRINT_INDENT + item.key, '=', repr(item.value))
    print(indent + '}')
