import pytest

from pyenum import EnumItem, create_enum
from pyenum.utils import combine, decompose, keys, pretty_print, tree


PERMISSIONS = create_enum('Permission', ['READ', 'WRITE', 'EXECUTE'])


def test_combine():
    assert combine() == 0
    assert combine(PERMISSIONS.READ, PERMISSIONS.EXECUTE) == 5
    assert combine(PERMISSIONS.WRITE, 8) == 10


def test_decompose():
    value = PERMISSIONS.READ | PERMISSIONS.EXECUTE
    assert decompose(PERMISSIONS, value) == [PERMISSIONS.READ, PERMISSIONS.EXECUTE]
    assert decompose(PERMISSIONS, PERMISSIONS.WRITE) == [PERMISSIONS.WRITE]
    assert decompose(PERMISSIONS, 0) == []


def test_decompose_composite_values():
    modes = create_enum('Mode', {'NONE': 0, 'READ': 1, 'WRITE': 2, 'ALL': 3, 'HALF': 0.5})
    assert keys(decompose(modes, 3)) == ['READ', 'WRITE', 'ALL']
    assert keys(decompose(modes, 1)) == ['READ']


def test_pretty_print(capsys):
    pretty_print(PERMISSIONS)
    assert capsys.readouterr().out == 'enum Permission {\n    READ = 1\n    WRITE = 2\n    EXECUTE = 4\n}\n'


def test_tree(capsys):
    tree(PERMISSIONS)
    assert capsys.readouterr().out == 'Permission (enum)\n+--- READ = 1\n+--- WRITE = 2\n`--- EXECUTE = 4\n'


def test_flags_must_be_integers():
    with pytest.raises(TypeError):
        combine(PERMISSIONS.READ, 1.5)
    with pytest.raises(TypeError):
        combine(EnumItem('HALF', 0.5))
    with pytest.raises(TypeError):
        decompose(PERMISSIONS, 1.5)
    assert decompose(PERMISSIONS, PERMISSIONS.READ) == [PERMISSIONS.READ]
