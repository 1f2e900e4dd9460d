'''
Represents a named, fixed set of enum items.
'''
from collections import OrderedDict
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Text, Tuple, Union
from warnings import warn

from .item import EnumItem, Number, strict_equals

Definition = Union[Mapping, Iterable, None]


class ReservedKeyError(ValueError):
    '''
    Raised when an enum key collides with a name used by the Enum's interface.
    '''

    def __init__(self, key: Text):
        super().__init__(key)

        self.key = key

    def __str__(self):
        return f"Enum key {self.key!r} is a reserved word"


class DuplicateValueWarning(UserWarning):
    '''
    Warns that several keys of an enum share the same value.
    '''


class Enum(Mapping):
    '''
    Represents an enum: a read-only mapping of keys to EnumItems.

    Items are also reachable as attributes (``color.RED``). Any lookup accepts a key,
    an EnumItem or a value.
    '''
    RESERVED_KEYS = frozenset({
        'name', 'enums', 'get', 'getKey', 'getValue',
        'get_key', 'get_value', 'get_by_key', 'get_by_item', 'get_by_value',
        'keys', 'items', 'values', 'warn_duplicate_values',
    })

    _WARN_DUPLICATE_VALUES = True

    @staticmethod
    def warn_duplicate_values(enabled: bool = True):
        '''
        Control whether a DuplicateValueWarning is issued for mappings that reuse a value.
        '''
        Enum._WARN_DUPLICATE_VALUES = bool(enabled)

    @staticmethod
    def _as_mapping(definition: Definition) -> Mapping:
        '''
        Convert a sequence of keys to bit-flag values, in order.
        '''
        if definition is None:
            return {}
        if isinstance(definition, Mapping):
            return definition
        if isinstance(definition, (str, bytes)) or not isinstance(definition, Iterable):
            raise TypeError("definition must be a sequence of keys or a mapping of keys to values.")

        flags = OrderedDict()
        for i, key in enumerate(definition):
            flags[key] = 1 << i
        return flags

    def __init__(self, name: Text, definition: Definition = None, *, stacklevel: int = 1):
        '''
        @param name         The name of the enum.
        @param definition   A sequence of keys (numbered 1, 2, 4, ...) or a mapping of keys to values.
                            Keys are converted to ``str``.
        @param stacklevel   Like ``warnings.warn``'s, for warnings about the definition.
                            Wrappers pass 2 to attribute warnings to their own caller.
        '''
        is_mapping = isinstance(definition, Mapping)
        items = OrderedDict()

        for key, value in Enum._as_mapping(definition).items():
            if key is not None:
                key = str(key)
            if key in Enum.RESERVED_KEYS:
                raise ReservedKeyError(key)

            items[key] = EnumItem(key, value)

        object.__setattr__(self, '_Enum__name', name)
        object.__setattr__(self, '_Enum__items', items)
        object.__setattr__(self, '_Enum__enums', tuple(items.values()))

        if is_mapping and Enum._WARN_DUPLICATE_VALUES:
            self.__check_duplicate_values(stacklevel)

    def __check_duplicate_values(self, stacklevel: int):
        seen = {}
        for item in self.__enums:
            if item.value in seen:
                warn(f"Enum {self.__name!r}: {item.key!r} has the same value as {seen[item.value]!r} ({item.value!r}).",
                     category=DuplicateValueWarning, stacklevel=stacklevel + 2)
            else:
                seen[item.value] = item.key

    @property
    def name(self) -> Text:
        '''
        Gets the name of the enum.
        '''
        return self.__name

    @property
    def enums(self) -> Tuple[EnumItem, ...]:
        '''
        Gets the enum's items, in definition order.
        '''
        return self.__enums

    def get_by_key(self, key: Text) -> Optional[EnumItem]:
        '''
        Gets the item named ``key``, or ``None``.
        '''
        return self.__items.get(key)

    def get_by_item(self, item: EnumItem) -> Optional[EnumItem]:
        '''
        Gets the first item with the same key as ``item``, or ``None``.
        '''
        for candidate in self.__enums:
            if candidate.is_(item):
                return candidate
        return None

    def get_by_value(self, value: Any) -> Optional[EnumItem]:
        '''
        Gets the first item whose value is ``value``, or ``None``.
        '''
        for candidate in self.__enums:
            if strict_equals(candidate.value, value):
                return candidate
        return None

    def get(self, probe: Union[EnumItem, Text, Any], default: Optional[Any] = None, /):
        '''
        Gets the item matching ``probe``.

        @param probe    A key (str), an EnumItem (matched by key) or a value.
        @param default  Returned when ``probe`` is ``None`` or nothing matches.

        @returns The matching EnumItem, or ``default``.
        '''
        if probe is None:
            return default

        if isinstance(probe, str):
            item = self.get_by_key(probe)
        elif isinstance(probe, EnumItem):
            item = self.get_by_item(probe)
        else:
            item = self.get_by_value(probe)

        return default if item is None else item

    def get_key(self, probe: Union[EnumItem, Text, Any]) -> Optional[Text]:
        '''
        Gets the key of the item matching ``probe``, or ``None``.
        '''
        item = self.get(probe)
        return None if item is None else item.key

    def get_value(self, probe: Union[EnumItem, Text, Any]) -> Optional[Number]:
        '''
        Gets the value of the item matching ``probe``, or ``None``.
        '''
        item = self.get(probe)
        return None if item is None else item.value

    getKey = get_key
    getValue = get_value

    def __getattr__(self, key: Text) -> EnumItem:
        try:
            return self.__dict__['_Enum__items'][key]
        except KeyError:
            raise AttributeError(key) from None

    def __setattr__(self, name: Text, value: Any):
        raise AttributeError(f"{type(self).__name__} {self.__name!r} is read-only")

    def __delattr__(self, name: Text):
        raise AttributeError(f"{type(self).__name__} {self.__name!r} is read-only")

    def __getitem__(self, probe: Union[EnumItem, Text, Any]) -> EnumItem:
        item = self.get(probe)
        if item is None:
            raise KeyError(probe)
        return item

    def __iter__(self):
        return iter(self.__items)

    def __len__(self):
        return len(self.__items)

    def __contains__(self, probe: Union[EnumItem, Text, Any]):
        return self.get(probe) is not None

    def __str__(self):
        return 'enum {}'.format(self.name)

    def __repr__(self):
        return 'Enum({!r}, [{}])'.format(self.name, ', '.join('({!r}, {!r})'.format(item.key, item.value)
                                                               for item in self.enums))
