"""Query result rows from SQLAlchemy.

Rows are tuple-like, but unlike tuples, each row knows names of its columns,
so rows are treated the same way as rows of a tabular view.
"""

from sqlalchemy.engine import Row

from objadapter import commands
from objadapter import exceptions
from objadapter.components import Members
from objadapter.enums import Shape


@commands.classify.register()
def classify(value: Row) -> Shape:
    return Shape.row


@commands.get_members.register()
def get_members(row: Row) -> Members:
    return Members(properties=[], fields=list(row._fields))


@commands.get_field.register()
def get_field(row: Row, name: str) -> str:
    try:
        value = row._mapping[name]
    except KeyError:
        raise exceptions.NoSuchValueExists(column=name)
    return '' if value is None else str(value)
