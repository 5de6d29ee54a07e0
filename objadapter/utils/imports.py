import importlib
from typing import Iterable

from objadapter.exceptions import InvalidPythonPath


def importstr(path):
    if ':' not in path:
        raise InvalidPythonPath(path=path)
    module, obj = path.split(':', 1)
    module = importlib.import_module(module)
    obj = getattr(module, obj)
    return obj


def import_modules(modules: Iterable[str]) -> None:
    # Command implementations are registered as a side effect of import.
    for name in modules:
        importlib.import_module(name)
