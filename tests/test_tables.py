import pytest

from objadapter import exceptions
from objadapter.tables import DataRowView
from objadapter.tables import DataSet
from objadapter.tables import DataTable
from objadapter.tables import DataView


def _table(name='country', columns=('code', 'name'), rows=()):
    table = DataTable(name)
    for column in columns:
        table.columns.add(column)
    for values in rows:
        row = table.new_row()
        for column, value in zip(columns, values):
            row[column] = value
        table.add_row(row)
    return table


def test_columns():
    table = _table()
    assert table.columns.names() == ['code', 'name']
    assert table.columns.contains('code')
    assert 'name' in table.columns
    assert not table.columns.contains('Code')
    assert table.columns[1].name == 'name'
    assert table.columns['name'].ordinal == 1
    assert len(table.columns) == 2


def test_duplicate_column():
    table = _table()
    with pytest.raises(exceptions.DuplicateColumn):
        table.columns.add('code')
    assert table.columns.names() == ['code', 'name']


def test_unknown_column():
    table = _table()
    with pytest.raises(exceptions.ColumnNotFound):
        table.columns['population']


def test_row_values():
    table = _table(rows=[('lt', 'Lithuania')])
    row = table.rows[0]
    assert row['code'] == 'lt'
    assert row.values() == ['lt', 'Lithuania']
    assert row.to_dict() == {'code': 'lt', 'name': 'Lithuania'}


def test_row_values_after_new_column():
    table = _table(rows=[('lt', 'Lithuania')])
    table.columns.add('population')
    assert table.rows[0].values() == ['lt', 'Lithuania', None]


def test_row_unknown_column():
    table = _table()
    row = table.new_row()
    with pytest.raises(exceptions.ColumnNotFound) as e:
        row['population'] = 42
    assert e.value.message == (
        "Column 'population' does not belong to <table name='country'>."
    )
    with pytest.raises(exceptions.ColumnNotFound):
        row['population']


def test_add_row_from_other_table():
    table = _table()
    other = _table('city')
    with pytest.raises(exceptions.RowNotInTable):
        table.add_row(other.new_row())
    assert table.rows == []


def test_row_added_listeners():
    table = _table()
    added = []
    table.row_added.append(added.append)
    row = table.add_row(table.new_row())
    assert added == [row]


def test_bulk_load_defers_listeners():
    table = _table()
    added = []
    table.row_added.append(added.append)

    table.begin_load_data()
    assert table.loading
    first = table.add_row(table.new_row())
    second = table.add_row(table.new_row())
    assert added == []
    assert table.rows == [first, second]

    table.end_load_data()
    assert not table.loading
    assert added == [first, second]


def test_load_data_released_on_error():
    table = _table()
    with pytest.raises(ValueError):
        with table.load_data():
            assert table.loading
            raise ValueError
    assert not table.loading


def test_dataset_tables():
    dataset = DataSet()
    assert dataset.name == 'NewDataSet'
    assert dataset.tables.get('country') is None
    assert 'country' not in dataset.tables

    table = dataset.tables.add(_table())
    assert dataset.tables.get('country') is table
    assert dataset.tables['country'] is table
    assert table.dataset is dataset
    assert dataset.tables.names() == ['country']
    assert list(dataset.tables) == [table]


def test_dataset_duplicate_table():
    dataset = DataSet('geo')
    dataset.tables.add(_table())
    with pytest.raises(exceptions.DuplicateTable) as e:
        dataset.tables.add(_table())
    assert e.value.message == "Table 'country' already belongs to dataset 'geo'."


def test_view():
    table = _table(rows=[
        ('lt', 'Lithuania'),
        ('lv', 'Latvia'),
        ('ee', 'Estonia'),
    ])
    view = DataView(table, row_filter=lambda row: row['code'] != 'lv')
    assert len(view) == 2
    assert [r['name'] for r in view] == ['Lithuania', 'Estonia']
    assert isinstance(view[1], DataRowView)
    assert view[1].row is table.rows[2]
    assert view[1].view is view


def test_table_list():
    table = _table(rows=[('lt', 'Lithuania')])
    view = table.get_list()
    assert isinstance(view, DataView)
    assert view.table is table
    assert [r['code'] for r in view] == ['lt']
