from typing import List

import logging

from objadapter import commands
from objadapter.commands.fields import read_cell
from objadapter.commands.shapes import get_items
from objadapter.components import ObjectAdapter
from objadapter.tables.components import DataTable

log = logging.getLogger(__name__)


@commands.copy.register(ObjectAdapter, DataTable, object, (list, tuple))
def copy(
    adapter: ObjectAdapter,
    table: DataTable,
    source: object,
    columns: List[str],
) -> None:
    if source is None or not columns:
        return

    items = get_items(source)

    for column in columns:
        if not table.columns.contains(column):
            table.columns.add(column)

    errors = 0
    table.begin_load_data()
    try:
        for element in items:
            row = table.new_row()
            for column in columns:
                cell = read_cell(element, column)
                if not cell.ok:
                    errors += 1
                row[column] = cell.text
            table.add_row(row)
    finally:
        table.end_load_data()

    log.debug(
        "Copied %d rows into %r table (%d cells with errors).",
        len(items), table.name, errors,
    )
