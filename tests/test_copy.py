import pytest

from objadapter import commands
from objadapter.tables import DataTable


class Record:

    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def _values(table):
    return [row.values() for row in table.rows]


def test_copy(adapter):
    table = DataTable('record')
    source = [Record(A=1, B='x'), Record(A=2, B='y')]
    commands.copy(adapter, table, source, ['A', 'B'])
    assert table.columns.names() == ['A', 'B']
    assert _values(table) == [['1', 'x'], ['2', 'y']]
    assert not table.loading


def test_copy_single_element(adapter):
    table = DataTable('record')
    commands.copy(adapter, table, Record(A=1), ['A'])
    assert _values(table) == [['1']]


def test_copy_scalars(adapter):
    table = DataTable('int')
    commands.copy(adapter, table, [1, 2], ['Value'])
    assert _values(table) == [['1'], ['2']]


def test_none_source(adapter):
    table = DataTable('record')
    commands.copy(adapter, table, None, ['A'])
    assert table.columns.names() == []
    assert table.rows == []


def test_no_columns(adapter):
    table = DataTable('record')
    commands.copy(adapter, table, [object(), object()], [])
    assert table.columns.names() == []
    assert table.rows == []


def test_empty_source(adapter):
    table = DataTable('record')
    commands.copy(adapter, table, [], ['A'])
    assert table.columns.names() == ['A']
    assert table.rows == []


def test_existing_columns(adapter):
    table = DataTable('record')
    table.columns.add('B')
    table.columns.add('X')
    commands.copy(adapter, table, [Record(A=1, B='x')], ['A', 'B'])
    assert table.columns.names() == ['B', 'X', 'A']
    assert table.rows[0].to_dict() == {'B': 'x', 'X': None, 'A': '1'}


def test_missing_values(adapter):
    table = DataTable('record')
    source = [Record(A=1, B='x'), Record(A=2)]
    commands.copy(adapter, table, source, ['A', 'B'])
    assert _values(table) == [
        ['1', 'x'],
        ['2', 'no such value exists: B'],
    ]


def test_error_reading_value(adapter):
    table = DataTable('record')
    commands.copy(adapter, table, [Record(A=None)], ['A'])
    assert _values(table) == [['error reading value: A']]


def test_listeners_notified_after_load(adapter):
    table = DataTable('record')
    notified = []

    def listener(row):
        notified.append((table.loading, row['A']))

    table.row_added.append(listener)
    commands.copy(adapter, table, [Record(A=1), Record(A=2)], ['A'])
    assert notified == [(False, '1'), (False, '2')]


def test_load_released_on_error(adapter, monkeypatch):
    table = DataTable('record')

    def add_row(row):
        raise RuntimeError('add_row failed')

    monkeypatch.setattr(table, 'add_row', add_row)
    with pytest.raises(RuntimeError, match='add_row failed'):
        commands.copy(adapter, table, [Record(A=1)], ['A'])
    assert not table.loading


def test_source_is_not_modified(adapter):
    table = DataTable('record')
    source = [Record(A=1), Record(B=2)]
    commands.copy(adapter, table, source, ['A'])
    assert len(source) == 2
    assert vars(source[1]) == {'B': 2}
