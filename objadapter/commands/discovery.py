from typing import Any
from typing import List

import logging

from objadapter import commands
from objadapter.components import ObjectAdapter
from objadapter.enums import Shape
from objadapter.utils.schema import NA

log = logging.getLogger(__name__)


@commands.discover.register()
def discover(adapter: ObjectAdapter, source: object) -> List[str]:
    inner = commands.get_list(source)
    shape = commands.classify(inner)

    if shape == Shape.view:
        columns = list(commands.get_columns(inner))

    elif shape == Shape.list:
        # Only the first element is inspected, the list is assumed to be
        # homogeneous.
        first = next(iter(inner), NA)
        if first is NA:
            columns = []
        else:
            columns = discover_element(adapter, first)

    else:
        columns = discover_element(adapter, inner)

    log.debug("Discovered %s columns: %r.", shape.value, columns)
    return columns


def discover_element(adapter: ObjectAdapter, element: Any) -> List[str]:
    shape = commands.classify(element)
    if shape == Shape.scalar:
        return [adapter.value_column]
    if shape == Shape.text:
        return [adapter.text_column]
    return commands.get_members(element).names()
