from __future__ import annotations

from typing import Any
from typing import List
from typing import TYPE_CHECKING

from objadapter.dispatcher import command

if TYPE_CHECKING:
    from objadapter.components import Members
    from objadapter.components import ObjectAdapter
    from objadapter.enums import Shape
    from objadapter.tables.components import DataTable


@command()
def get_error_context():
    """Get error context for a given object."""


@command()
def get_list(source: Any) -> Any:
    """Return list produced by a list source.

    Values, that are not list sources, are returned as is. Only one level is
    unwrapped.
    """


@command()
def materialize(source: Any) -> Any:
    """Read one-shot iterators into a list.

    Discovery and copy both iterate over the same source, so generators and
    other iterators must be read once, before filling a table.
    List sources are unwrapped once and their list is kept, because
    `get_list()` can return an iterator.
    """


@command()
def classify(value: Any) -> Shape:
    """Return runtime shape of a given value."""


@command()
def get_columns(view: Any) -> List[str]:
    """Return column names of a tabular view, in table order."""


@command()
def get_members(value: Any) -> Members:
    """Return names of readable properties and public fields of a value.

    Properties come first and fields second, each in the order they are
    defined. Names present as both a property and a field are listed twice.
    """


@command()
def get_field(element: Any, name: str) -> str:
    """Return text representation of a named value of a source element.

    Raises `FieldAccessError` if value with given name does not exist or can't
    be read.
    """


@command()
def discover(adapter: ObjectAdapter, source: Any) -> List[str]:
    """Discover table column names from a source value.

    If source is a list, only the first element is inspected, all other
    elements are assumed to have the same shape.
    """


@command()
def copy(
    adapter: ObjectAdapter,
    table: DataTable,
    source: Any,
    columns: List[str],
) -> None:
    """Add missing columns to a table and append a row for each element."""


@command()
def fill():
    """Fill a table with data from an object or a collection of objects.

        fill(ObjectAdapter, DataSet, source)
        fill(ObjectAdapter, DataSet, table_name, source)
        fill(ObjectAdapter, DataTable, source)

    """
