from typing import Any
from typing import Callable

import collections.abc
import logging

from objadapter import commands
from objadapter import exceptions
from objadapter.commands.members import has_public_field
from objadapter.commands.members import has_readable_property
from objadapter.components import Cell
from objadapter.utils.types import SCALAR_TYPES
from objadapter.utils.types import is_named_tuple

log = logging.getLogger(__name__)


def read_value(name: str, read: Callable[[], Any]) -> str:
    """Read a value and return its text representation.

    Any error raised by `read` is re-raised as `ErrorReadingValue`. `None`
    values can't be represented as text and are reported the same way.
    """
    try:
        value = read()
        text = None if value is None else str(value)
    except Exception as e:
        raise exceptions.ErrorReadingValue(column=name) from e
    if text is None:
        raise exceptions.ErrorReadingValue(column=name)
    return text


def read_cell(element: Any, name: str) -> Cell:
    """Read a single table cell value from a source element.

    Errors are not raised, instead error message becomes cell text.
    """
    try:
        return Cell(commands.get_field(element, name))
    except exceptions.FieldAccessError as e:
        log.debug("Can't read %r value from %r: %s", name, element, e.message)
        return Cell(e.message, e)


@commands.get_field.register()
def get_field(obj: object, name: str) -> str:
    if has_readable_property(type(obj), name) or has_public_field(obj, name):
        return read_value(name, lambda: getattr(obj, name))
    raise exceptions.NoSuchValueExists(column=name)


@commands.get_field.register(SCALAR_TYPES, str)  # noqa
def get_field(value: Any, name: str) -> str:
    # Name is ignored, scalars have a single value.
    return str(value)


@commands.get_field.register()  # noqa
def get_field(value: str, name: str) -> str:
    return value


@commands.get_field.register()  # noqa
def get_field(value: collections.abc.Mapping, name: str) -> str:
    if name in value:
        return read_value(name, lambda: value[name])
    raise exceptions.NoSuchValueExists(column=name)


@commands.get_field.register()  # noqa
def get_field(value: tuple, name: str) -> str:
    if is_named_tuple(value):
        if name in value._fields:
            return read_value(name, lambda: getattr(value, name))
        raise exceptions.NoSuchValueExists(column=name)
    return commands.get_field[object, str](value, name)
