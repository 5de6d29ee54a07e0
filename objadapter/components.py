from __future__ import annotations

from typing import Any
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import TYPE_CHECKING

import abc
import logging

from objadapter import commands
from objadapter.core.config import RawConfig
from objadapter.core.config import read_config
from objadapter.utils.imports import import_modules

if TYPE_CHECKING:
    from objadapter.exceptions import FieldAccessError

log = logging.getLogger(__name__)


class ListSource(abc.ABC):
    """Any object, that can produce a list of elements via `get_list()`.

    Classes do not need to inherit from `ListSource`, having a callable
    `get_list` attribute is enough.
    """

    @abc.abstractmethod
    def get_list(self) -> Any:
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is ListSource:
            return callable(getattr(subclass, 'get_list', None))
        return NotImplemented


class MaterializedList:
    """List source returning the same, already produced list on each call."""

    def __init__(self, items: Any):
        self.items = items

    def __repr__(self):
        return f'<{type(self).__name__} {self.items!r}>'

    def get_list(self) -> Any:
        return self.items


class Members(NamedTuple):
    # Names of readable properties.
    properties: List[str]
    # Names of public fields.
    fields: List[str]

    def names(self) -> List[str]:
        return self.properties + self.fields


class Cell(NamedTuple):
    text: str
    error: Optional[FieldAccessError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ObjectAdapter:
    """Fills tables with data from objects or collections of objects.

    Table columns are discovered from the given source on each fill, so the
    same adapter can be used to fill different tables from differently shaped
    sources.

    Example:

        adapter = ObjectAdapter()
        dataset = DataSet()
        adapter.fill(dataset, [Person('Jonas', 42)])
        dataset.tables['list'].rows

    """

    rc: RawConfig
    # Column name used for numbers and other scalar values.
    value_column: str
    # Column name used for strings.
    text_column: str

    def __init__(self, rc: RawConfig = None):
        if rc is None:
            rc = read_config()
        self.rc = rc
        self.value_column = rc.get('columns', 'value', required=True)
        self.text_column = rc.get('columns', 'text', required=True)
        import_modules(rc.get('commands', 'modules', default=[]))

    def __repr__(self):
        return (
            f'<{type(self).__name__} value={self.value_column!r} '
            f'text={self.text_column!r}>'
        )

    def fill(self, *args) -> None:
        """Fill a table with data from given source.

        Supported signatures:

            fill(DataSet, source)
            fill(DataSet, table_name, source)
            fill(DataTable, source)

        """
        commands.fill(self, *args)

    def discover(self, source: Any) -> List[str]:
        return commands.discover(self, source)
