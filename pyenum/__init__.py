'''
Named enumerations with bit-flag values

This module builds closed, named sets of constants. Each constant (an ``EnumItem``) pairs a key
with a numeric value and can be looked up by key, by value or by another item.
'''
from typing import Text as _Text

from . import utils
from .enum import DuplicateValueWarning, Enum, ReservedKeyError
from .item import EnumEncoder, EnumItem, InvalidItemError


def create_enum(name: _Text, definition=None, /) -> Enum:
    '''
    Create an enum named ``name``.

    @param name         The name of the enum.
    @param definition   Either a sequence of keys, numbered as bit flags (1, 2, 4, ...) in order,
                        or a mapping of keys to values.

    @raises ReservedKeyError    If a key is one of ``Enum.RESERVED_KEYS``.
    @raises InvalidItemError    If a key or a value is ``None``.

    @returns Enum
    '''
    return Enum(name, definition, stacklevel=2)


createEnum = create_enum
