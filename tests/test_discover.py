import collections

from objadapter.components import ObjectAdapter
from objadapter.tables import DataTable
from objadapter.tables import DataView


class Record:

    def __init__(self, a, b):
        self.A = a
        self.B = b


class Person:

    def __init__(self, name, age):
        self.name = name
        self.age = age

    @property
    def adult(self):
        return self.age >= 18


class Wrapper:

    def __init__(self, inner):
        self.inner = inner

    def get_list(self):
        return self.inner


Point = collections.namedtuple('Point', ['x', 'y'])


def _table():
    table = DataTable('country')
    table.columns.add('code')
    table.columns.add('name')
    return table


def test_scalar(adapter):
    assert adapter.discover(42) == ['Value']
    assert adapter.discover(4.2) == ['Value']


def test_text(adapter):
    assert adapter.discover('Lithuania') == ['Text']


def test_record(adapter):
    assert adapter.discover(Record(1, 'x')) == ['A', 'B']


def test_record_properties_first(adapter):
    assert adapter.discover(Person('Jonas', 42)) == ['adult', 'name', 'age']


def test_list_of_records(adapter):
    source = [Record(1, 'x'), Record(2, 'y')]
    assert adapter.discover(source) == ['A', 'B']


def test_list_of_scalars(adapter):
    assert adapter.discover([1, 2, 3]) == ['Value']
    assert adapter.discover(('a', 'b')) == ['Text']


def test_only_first_element_is_inspected(adapter):
    source = [Record(1, 'x'), Person('Jonas', 42), 42]
    assert adapter.discover(source) == ['A', 'B']
    assert adapter.discover([42, Record(1, 'x')]) == ['Value']


def test_empty_list(adapter):
    assert adapter.discover([]) == []
    assert adapter.discover(()) == []
    assert adapter.discover(set()) == []


def test_list_source(adapter):
    assert adapter.discover(Wrapper([Record(1, 'x')])) == ['A', 'B']
    assert adapter.discover(Wrapper(Record(1, 'x'))) == ['A', 'B']
    assert adapter.discover(Wrapper([])) == []


def test_view(adapter):
    table = _table()
    assert adapter.discover(DataView(table)) == ['code', 'name']


def test_empty_view(adapter):
    # Columns of a view are known even if there are no rows.
    assert adapter.discover(_table()) == ['code', 'name']


def test_list_of_row_views(adapter):
    table = _table()
    row = table.new_row()
    row['code'] = 'lt'
    table.add_row(row)
    assert adapter.discover(list(DataView(table))) == ['code', 'name']


def test_no_members(adapter):
    assert adapter.discover(object()) == []
    assert adapter.discover([object()]) == []


def test_mapping(adapter):
    assert adapter.discover({'code': 'lt', 'name': 'Lithuania'}) == ['code', 'name']
    assert adapter.discover([{'code': 'lt'}, {'name': 'Latvia'}]) == ['code']


def test_named_tuple(adapter):
    assert adapter.discover(Point(1, 2)) == ['x', 'y']
    assert adapter.discover([Point(1, 2)]) == ['x', 'y']


def test_plain_tuple_is_a_list(adapter):
    assert adapter.discover((1, 2)) == ['Value']


def test_custom_column_names(rc):
    adapter = ObjectAdapter(rc.fork({
        'columns': {
            'value': 'Number',
            'text': 'String',
        },
    }))
    assert adapter.discover(42) == ['Number']
    assert adapter.discover('Lithuania') == ['String']
