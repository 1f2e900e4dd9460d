import pytest

from pyenum.__main__ import main, parse_definition, parse_int, parse_number


def run(capsys, *argv):
    with pytest.raises(SystemExit) as exit_info:
        main(list(argv))
    captured = capsys.readouterr()
    return exit_info.value.code, captured.out, captured.err


def test_parse_number():
    assert parse_number('10') == 10
    assert parse_number('0x10') == 16
    assert parse_number('0b101') == 5
    assert parse_number('1.5') == 1.5
    with pytest.raises(ValueError):
        parse_number('ten')
    assert parse_int('0x5') == 5
    with pytest.raises(ValueError):
        parse_int('1.5')


def test_parse_definition():
    assert parse_definition(['A', 'B']) == ['A', 'B']
    assert parse_definition(['A=1', 'B=0x4']) == {'A': 1, 'B': 4}
    with pytest.raises(ValueError):
        parse_definition(['A', 'B=2'])


def test_print(capsys):
    code, out, _ = run(capsys, 'print', 'Color', 'RED', 'GREEN')
    assert code == 0
    assert out == 'enum Color {\n    RED = 1\n    GREEN = 2\n}\n'


def test_print_tree(capsys):
    code, out, _ = run(capsys, 'print', 'Color', 'RED=1', 'BLUE=4', '--tree')
    assert code == 0
    assert out == 'Color (enum)\n+--- RED = 1\n`--- BLUE = 4\n'


def test_get(capsys):
    code, out, _ = run(capsys, 'get', 'Color', 'RED=1', 'GREEN=2', 'BLUE=4', '--key', 'GREEN', '--value', '4')
    assert code == 0
    assert out == 'GREEN=[key: GREEN, value: 2]\n4=[key: BLUE, value: 4]\n'


def test_get_hide_names(capsys):
    code, out, _ = run(capsys, 'get', 'Color', 'RED', '--key', 'RED', '--hide-names')
    assert code == 0
    assert out == '[key: RED, value: 1]\n'


def test_get_missing(capsys):
    code, out, err = run(capsys, 'get', 'Color', 'RED', '--key', 'PURPLE')
    assert code == 1
    assert out == ''
    assert 'PURPLE' in err


def test_flags(capsys):
    code, out, _ = run(capsys, 'flags', 'Permission', 'READ', 'WRITE', 'EXECUTE', '--value', '5')
    assert code == 0
    assert out == 'READ | EXECUTE\n'


def test_reserved_key_is_usage_error(capsys):
    code, _, err = run(capsys, 'print', 'Bad', 'name', 'OTHER')
    assert code == 2
    assert 'reserved word' in err


def test_mixed_definitions_is_usage_error(capsys):
    code, _, err = run(capsys, 'print', 'Bad', 'A', 'B=2')
    assert code == 2
    assert 'KEY=VALUE' in err


def test_flags_value_must_be_an_integer(capsys):
    code, out, err = run(capsys, 'flags', 'Permission', 'READ', 'WRITE', '--value', '1.5')
    assert code == 2
    assert out == ''
    assert 'invalid' in err
