from objadapter.tables.components import DataColumn
from objadapter.tables.components import DataRow
from objadapter.tables.components import DataRowView
from objadapter.tables.components import DataSet
from objadapter.tables.components import DataTable
from objadapter.tables.components import DataView

__all__ = [
    'DataColumn',
    'DataRow',
    'DataRowView',
    'DataSet',
    'DataTable',
    'DataView',
]

# Register table related command implementations.
import objadapter.tables.commands  # noqa
