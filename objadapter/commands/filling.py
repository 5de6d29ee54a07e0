import logging

from objadapter import commands
from objadapter import exceptions
from objadapter.components import ObjectAdapter
from objadapter.tables.components import DataSet
from objadapter.tables.components import DataTable

log = logging.getLogger(__name__)


@commands.fill.register()
def fill(adapter: ObjectAdapter, dataset: DataSet, source: object) -> None:
    # Table is named after the source type.
    fill(adapter, dataset, type(source).__name__, source)


@commands.fill.register()  # noqa
def fill(
    adapter: ObjectAdapter,
    dataset: DataSet,
    table_name: str,
    source: object,
) -> None:
    table = dataset.tables.get(table_name)
    exists = table is not None

    if not exists:
        table = DataTable(table_name)

    fill(adapter, table, source)

    # New tables are added only after they were filled successfully.
    if not exists:
        dataset.tables.add(table)


@commands.fill.register()  # noqa
def fill(adapter: ObjectAdapter, table: DataTable, source: object) -> None:
    if source is None:
        raise exceptions.InvalidArgument(table, argument='source')

    source = commands.materialize(source)
    columns = commands.discover(adapter, source)
    commands.copy(adapter, table, source, columns)
