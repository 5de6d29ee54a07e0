from typing import Dict
from typing import List

from objadapter import commands
from objadapter.components import Members
from objadapter.enums import Shape
from objadapter.tables.components import DataRowView
from objadapter.tables.components import DataSet
from objadapter.tables.components import DataTable
from objadapter.tables.components import DataView


@commands.get_error_context.register()
def get_error_context(this: object, *, prefix='this') -> Dict[str, str]:
    return {}


@commands.get_error_context.register()  # noqa
def get_error_context(dataset: DataSet, *, prefix='this') -> Dict[str, str]:
    return {
        'dataset': f'{prefix}.name',
    }


@commands.get_error_context.register()  # noqa
def get_error_context(table: DataTable, *, prefix='this') -> Dict[str, str]:
    return {
        'dataset': f'{prefix}.dataset.name',
        'table': f'{prefix}.name',
    }


@commands.get_error_context.register()  # noqa
def get_error_context(row: DataRowView, *, prefix='this') -> Dict[str, str]:
    return commands.get_error_context(row.view.table, prefix=f'{prefix}.view.table')


@commands.classify.register()
def classify(value: DataView) -> Shape:
    return Shape.view


@commands.classify.register()  # noqa
def classify(value: DataRowView) -> Shape:
    return Shape.row


@commands.get_columns.register()
def get_columns(view: DataView) -> List[str]:
    return view.table.columns.names()


@commands.get_members.register()
def get_members(row: DataRowView) -> Members:
    return Members(properties=[], fields=row.view.table.columns.names())


@commands.get_field.register()
def get_field(row: DataRowView, name: str) -> str:
    # Raises ColumnNotFound, if there is no such column in the table.
    value = row[name]
    return '' if value is None else str(value)
