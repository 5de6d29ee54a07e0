import importlib.metadata
from typing import Optional

from objadapter.components import ObjectAdapter
from objadapter.tables import DataSet
from objadapter.tables import DataTable
from objadapter.tables import DataView

__version__ = importlib.metadata.version(__name__)

_adapter: Optional[ObjectAdapter] = None


def fill(*args) -> None:
    """Fill a table using an adapter configured from default configuration."""
    global _adapter
    if _adapter is None:
        _adapter = ObjectAdapter()
    _adapter.fill(*args)


__all__ = [
    'DataSet',
    'DataTable',
    'DataView',
    'ObjectAdapter',
    'fill',
]
