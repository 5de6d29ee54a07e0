from typing import Any
from typing import List
from typing import Tuple

import collections.abc
import functools

from objadapter import commands
from objadapter.components import Members
from objadapter.utils.types import is_named_tuple


def is_public(name: Any) -> bool:
    return isinstance(name, str) and not name.startswith('_')


@functools.lru_cache(maxsize=256)
def _property_names(cls: type) -> Tuple[str, ...]:
    seen = set()
    names = []
    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if not is_public(name) or name in seen:
                continue
            seen.add(name)
            if isinstance(attr, property) and attr.fget is not None:
                names.append(name)
    return tuple(names)


@functools.lru_cache(maxsize=256)
def _slot_names(cls: type) -> Tuple[str, ...]:
    names = []
    for klass in cls.__mro__:
        slots = vars(klass).get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if is_public(name) and name not in names:
                names.append(name)
    return tuple(names)


def readable_properties(cls: type) -> List[str]:
    """Return names of public properties with a getter.

    Properties of the class itself come first, followed by inherited
    properties. Names redefined in a subclass with anything other than a
    property hide inherited properties.
    """
    return list(_property_names(cls))


def has_readable_property(cls: type, name: str) -> bool:
    return name in _property_names(cls)


def public_fields(obj: Any) -> List[str]:
    """Return names of public instance attributes.

    Attributes from instance `__dict__` come first, in assignment order,
    followed by `__slots__` attributes, that have a value.
    """
    names = [
        name
        for name in getattr(obj, '__dict__', {})
        if is_public(name)
    ]
    for name in _slot_names(type(obj)):
        if name not in names and hasattr(obj, name):
            names.append(name)
    return names


def has_public_field(obj: Any, name: str) -> bool:
    if not is_public(name):
        return False
    if name in getattr(obj, '__dict__', {}):
        return True
    return name in _slot_names(type(obj)) and hasattr(obj, name)


@commands.get_members.register()
def get_members(value: object) -> Members:
    return Members(
        properties=readable_properties(type(value)),
        fields=public_fields(value),
    )


@commands.get_members.register()  # noqa
def get_members(value: collections.abc.Mapping) -> Members:
    return Members(
        properties=[],
        fields=[key for key in value if isinstance(key, str)],
    )


@commands.get_members.register()  # noqa
def get_members(value: tuple) -> Members:
    if is_named_tuple(value):
        return Members(properties=[], fields=list(value._fields))
    return commands.get_members[object](value)
