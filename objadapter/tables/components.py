from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterator
from typing import List
from typing import Optional
from typing import Union

import contextlib
import logging

from objadapter import exceptions

log = logging.getLogger(__name__)


class DataColumn:
    type: str = 'column'
    name: str
    table: DataTable

    def __init__(self, table: DataTable, name: str):
        self.table = table
        self.name = name

    def __repr__(self):
        return f'<{type(self).__name__} name={self.name!r}>'

    @property
    def ordinal(self) -> int:
        return self.table.columns.names().index(self.name)


class DataColumnCollection:
    """Ordered columns of a table, looked up by name."""

    table: DataTable
    _columns: Dict[str, DataColumn]

    def __init__(self, table: DataTable):
        self.table = table
        self._columns = {}

    def __iter__(self) -> Iterator[DataColumn]:
        return iter(self._columns.values())

    def __len__(self):
        return len(self._columns)

    def __contains__(self, name: str):
        return name in self._columns

    def __getitem__(self, key: Union[str, int]) -> DataColumn:
        if isinstance(key, int):
            return list(self._columns.values())[key]
        if key not in self._columns:
            raise exceptions.ColumnNotFound(self.table, column=key)
        return self._columns[key]

    def contains(self, name: str) -> bool:
        return name in self._columns

    def add(self, name: str) -> DataColumn:
        if name in self._columns:
            raise exceptions.DuplicateColumn(self.table, column=name)
        column = DataColumn(self.table, name)
        self._columns[name] = column
        return column

    def names(self) -> List[str]:
        return list(self._columns)


class DataRow:
    table: DataTable
    _values: Dict[str, Any]

    def __init__(self, table: DataTable):
        self.table = table
        self._values = {}

    def __repr__(self):
        return f'<{type(self).__name__} {self.values()!r}>'

    def __getitem__(self, column: str) -> Any:
        self._check_column(column)
        return self._values.get(column)

    def __setitem__(self, column: str, value: Any):
        self._check_column(column)
        self._values[column] = value

    def _check_column(self, column: str):
        if column not in self.table.columns:
            raise exceptions.ColumnNotFound(self.table, column=column)

    def values(self) -> List[Any]:
        # Columns added after the row was filled read as None.
        return [self._values.get(name) for name in self.table.columns.names()]

    def to_dict(self) -> Dict[str, Any]:
        return dict(zip(self.table.columns.names(), self.values()))


class DataTable:
    """In memory table with ordered columns and rows.

    Rows added while the table is in bulk load mode (between
    `begin_load_data()` and `end_load_data()`) do not notify `row_added`
    listeners one by one, all listeners are notified when loading ends.
    """

    type: str = 'table'
    name: str
    dataset: Optional[DataSet] = None
    columns: DataColumnCollection
    rows: List[DataRow]
    loading: bool
    row_added: List[Callable[[DataRow], None]]

    def __init__(self, name: str = None):
        self.name = name
        self.columns = DataColumnCollection(self)
        self.rows = []
        self.loading = False
        self.row_added = []
        self._pending: List[DataRow] = []

    def __repr__(self):
        return (
            f'<{type(self).__name__} name={self.name!r} '
            f'columns={len(self.columns)} rows={len(self.rows)}>'
        )

    def get_list(self) -> DataView:
        return DataView(self)

    def new_row(self) -> DataRow:
        return DataRow(self)

    def add_row(self, row: DataRow) -> DataRow:
        if row.table is not self:
            raise exceptions.RowNotInTable(self)
        self.rows.append(row)
        if self.loading:
            self._pending.append(row)
        else:
            self._notify(row)
        return row

    def begin_load_data(self) -> None:
        self.loading = True

    def end_load_data(self) -> None:
        self.loading = False
        pending, self._pending = self._pending, []
        log.debug("Loaded %d rows into %r table.", len(pending), self.name)
        for row in pending:
            self._notify(row)

    @contextlib.contextmanager
    def load_data(self):
        self.begin_load_data()
        try:
            yield self
        finally:
            self.end_load_data()

    def _notify(self, row: DataRow) -> None:
        for listener in self.row_added:
            listener(row)


class DataTableCollection:
    dataset: DataSet
    _tables: Dict[str, DataTable]

    def __init__(self, dataset: DataSet):
        self.dataset = dataset
        self._tables = {}

    def __iter__(self) -> Iterator[DataTable]:
        return iter(self._tables.values())

    def __len__(self):
        return len(self._tables)

    def __contains__(self, name: str):
        return name in self._tables

    def __getitem__(self, name: str) -> DataTable:
        return self._tables[name]

    def get(self, name: str) -> Optional[DataTable]:
        return self._tables.get(name)

    def add(self, table: DataTable) -> DataTable:
        if table.name in self._tables:
            raise exceptions.DuplicateTable(
                table=table.name,
                dataset=self.dataset.name,
            )
        table.dataset = self.dataset
        self._tables[table.name] = table
        return table

    def names(self) -> List[str]:
        return list(self._tables)


class DataSet:
    type: str = 'dataset'
    name: str
    tables: DataTableCollection

    def __init__(self, name: str = 'NewDataSet'):
        self.name = name
        self.tables = DataTableCollection(self)

    def __repr__(self):
        return f'<{type(self).__name__} name={self.name!r} tables={self.tables.names()!r}>'


class DataView:
    """Ordered and optionally filtered view of table rows."""

    table: DataTable
    row_filter: Optional[Callable[[DataRow], bool]]

    def __init__(
        self,
        table: DataTable,
        row_filter: Callable[[DataRow], bool] = None,
    ):
        self.table = table
        self.row_filter = row_filter

    def __iter__(self) -> Iterator[DataRowView]:
        for row in self.table.rows:
            if self.row_filter is None or self.row_filter(row):
                yield DataRowView(self, row)

    def __len__(self):
        return sum(1 for _ in self)

    def __getitem__(self, index: int) -> DataRowView:
        return list(self)[index]


class DataRowView:
    type: str = 'row'
    view: DataView
    row: DataRow

    def __init__(self, view: DataView, row: DataRow):
        self.view = view
        self.row = row

    def __repr__(self):
        return f'<{type(self).__name__} {self.row.values()!r}>'

    def __getitem__(self, column: str) -> Any:
        return self.row[column]
