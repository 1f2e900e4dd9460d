'''
Represents a single item of an enum.
'''
from dataclasses import dataclass
from json import JSONEncoder
from operator import index
from typing import Any, Optional, Text, Union

Number = Union[int, float]


class InvalidItemError(ValueError):
    '''
    Raised when an EnumItem is created with a missing key or value.
    '''

    def __init__(self, key: Optional[Text], value: Optional[Number]):
        super().__init__(key, value)

        self.key = key
        self.value = value

    def __str__(self):
        return f"EnumItem key and/or value is invalid: key={self.key!r}, value={self.value!r}"


def strict_equals(left: Any, right: Any) -> bool:
    '''
    Equality that never matches a bool with a number (``True == 1`` is ``False`` here).
    '''
    return isinstance(left, bool) == isinstance(right, bool) and left == right


@dataclass(frozen=True, eq=False)
class EnumItem:
    '''
    Represents an item of an enum.

    Members:
        - key -- The enum key.
        - value -- The enum value.
    '''
    key: Optional[Text] = None
    value: Optional[Number] = None

    def __post_init__(self):
        if self.key is None or self.value is None:
            raise InvalidItemError(self.key, self.value)

    def is_(self, probe: Union['EnumItem', Text, Any]) -> bool:
        '''
        Checks if the item is the same as ``probe``.

        @param probe    A key, another EnumItem (compared by key) or a value.

        @returns The check result.
        '''
        if isinstance(probe, str):
            return self.key == probe
        if isinstance(probe, EnumItem):
            return self.key == probe.key
        return strict_equals(self.value, probe)

    def to_json(self) -> Number:
        '''
        Gets the representation used when serializing the item.
        '''
        return self.value

    def value_of(self) -> Number:
        '''
        Gets the value to compare with.
        '''
        return self.value

    @staticmethod
    def _comparable(other: Any) -> Any:
        if isinstance(other, EnumItem):
            return other.value_of()
        return other

    def __eq__(self, other):
        if isinstance(other, EnumItem):
            return self.key == other.key and strict_equals(self.value, other.value)
        return strict_equals(self.value, other)

    def __hash__(self):
        return hash(self.value)

    def __lt__(self, other):
        return self.value_of() < EnumItem._comparable(other)

    def __le__(self, other):
        return self.value_of() <= EnumItem._comparable(other)

    def __gt__(self, other):
        return self.value_of() > EnumItem._comparable(other)

    def __ge__(self, other):
        return self.value_of() >= EnumItem._comparable(other)

    def __int__(self):
        return int(self.value)

    def __float__(self):
        return float(self.value)

    def __index__(self):
        return index(self.value)

    def __or__(self, other):
        return self.value | EnumItem._comparable(other)

    __ror__ = __or__

    def __and__(self, other):
        return self.value & EnumItem._comparable(other)

    __rand__ = __and__

    def __xor__(self, other):
        return self.value ^ EnumItem._comparable(other)

    __rxor__ = __xor__

    def __str__(self):
        return f'[key: {self.key}, value: {self.value}]'

    def __repr__(self):
        return f'{type(self).__name__}({self.key!r}, {self.value!r})'


class EnumEncoder(JSONEncoder):
    '''
    JSON encoder that serializes enum items as their values.
    '''

    def default(self, o):  # pylint: disable=method-hidden
        if isinstance(o, EnumItem):
            return o.to_json()
        return super().default(o)
