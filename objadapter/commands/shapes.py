from typing import Any
from typing import List

import collections.abc

from objadapter import commands
from objadapter.components import ListSource
from objadapter.components import MaterializedList
from objadapter.enums import Shape
from objadapter.utils.types import SCALAR_TYPES
from objadapter.utils.types import is_named_tuple


@commands.get_list.register()
def get_list(source: object) -> Any:
    return source


@commands.get_list.register()  # noqa
def get_list(source: ListSource) -> Any:
    return source.get_list()


@commands.materialize.register()
def materialize(source: object) -> Any:
    return source


@commands.materialize.register()  # noqa
def materialize(source: collections.abc.Iterator) -> List[Any]:
    return list(source)


@commands.materialize.register()  # noqa
def materialize(source: ListSource) -> MaterializedList:
    # `get_list()` is called only once, because it can return the same
    # iterator on each call.
    inner = source.get_list()
    if isinstance(inner, collections.abc.Iterator):
        inner = list(inner)
    return MaterializedList(inner)


@commands.classify.register()
def classify(value: object) -> Shape:
    return Shape.record


@commands.classify.register(SCALAR_TYPES)  # noqa
def classify(value: Any) -> Shape:
    return Shape.scalar


@commands.classify.register()  # noqa
def classify(value: str) -> Shape:
    return Shape.text


@commands.classify.register((
    collections.abc.Sequence,
    collections.abc.Set,
    collections.abc.Iterator,
))  # noqa
def classify(value: Any) -> Shape:
    return Shape.list


@commands.classify.register()  # noqa
def classify(value: tuple) -> Shape:
    # Named tuples are records, not lists.
    if is_named_tuple(value):
        return Shape.record
    return Shape.list


def get_items(source: Any) -> List[Any]:
    """Return list of elements, that will be copied into a table as rows."""
    inner = commands.get_list(source)
    if commands.classify(inner) in (Shape.view, Shape.list):
        return list(inner)
    # A single object is copied as a list with one element.
    return [inner]
