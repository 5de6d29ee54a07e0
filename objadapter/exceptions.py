from typing import Any, Dict, Optional

import logging
import re


log = logging.getLogger(__name__)


class UnknownValue:

    def __str__(self):
        return '[UNKNOWN]'

    __repr__ = __str__


UNKNOWN_VALUE = UnknownValue()

# Order of well known context keys, all other keys follow in given order.
CONTEXT_ORDER = [
    'component',
    'dataset',
    'table',
    'column',
    'row',
    'type',
]


def _resolve_path(kwargs: Dict[str, Any], path: str) -> Any:
    value = kwargs
    for name in path.split('.'):
        if isinstance(value, dict):
            value = value.get(name, UNKNOWN_VALUE)
        else:
            value = getattr(value, name, UNKNOWN_VALUE)
        if value is UNKNOWN_VALUE or value is None:
            return UNKNOWN_VALUE
    return value


def resolve_context_vars(
    schema: Dict[str, str],
    this: Optional[Any],
    kwargs: Dict[str, Any],
) -> Dict[str, Any]:
    """Build error context from keyword arguments and a context schema.

    Schema maps context keys to dotted paths starting at one of keyword
    arguments. If `this` is given, schema is extended with paths returned by
    `get_error_context` command for `this`, usually a dataset, a table or a
    row.
    """
    context = {}
    if this is not None:
        from objadapter import commands
        schema = {**commands.get_error_context(this), **schema}
        kwargs = {**kwargs, 'this': this}
        context['component'] = f'{type(this).__module__}.{type(this).__name__}'

    used = set()
    for key, path in schema.items():
        path = path or key
        root = path.split('.', 1)[0]
        if root not in kwargs:
            continue
        used.add(root)
        value = _resolve_path(kwargs, path)
        if value is not UNKNOWN_VALUE:
            context[key] = value

    for key in kwargs.keys() - used:
        value = kwargs[key]
        context[key] = value if isinstance(value, (int, float, str)) else str(value)

    order = CONTEXT_ORDER + [k for k in (*schema, *kwargs) if k not in CONTEXT_ORDER]
    return dict(sorted(
        context.items(),
        key=lambda item: (order.index(item[0]), item[0]),
    ))


class BaseError(Exception):
    """Base class of all objadapter errors.

    Error message is rendered from `template` using error context. Context is
    built from keyword arguments and, if the single positional argument is
    given, from the component the error is about.

        ColumnNotFound(table, column='code')

    """

    type: str = None
    template: str = None
    context: Dict[str, Any] = {}

    def __init__(self, this: Any = None, **kwargs):
        self.type = getattr(this, 'type', None) or 'system'
        self.context = resolve_context_vars(self.context, this, kwargs)
        super().__init__(self.message)

    def __str__(self):
        lines = [self.message]
        if self.context:
            lines.append('  Context:')
            lines.extend(f'    {k}: {v}' for k, v in self.context.items())
        return '\n'.join(lines) + '\n'

    @property
    def message(self) -> str:
        return _render_template(self)


def _render_template(error: BaseError) -> str:
    context = dict(error.context)
    if error.type in context:
        # `{this}` renders as a short description of the component.
        context['this'] = f'<{error.type} name={context[error.type]!r}>'
    for match in re.finditer(r'\{(\w+)', error.template):
        context.setdefault(match.group(1), UNKNOWN_VALUE)
    return error.template.format(**context)


class UserError(BaseError):
    pass


class InvalidArgument(UserError):
    template = "Value of {argument!r} argument can't be None."


class DuplicateTable(UserError):
    template = "Table {table!r} already belongs to dataset {dataset!r}."


class DuplicateColumn(UserError):
    template = "Column {column!r} already exists."


class RowNotInTable(BaseError):
    template = "Row does not belong to {this}."


class ConfigurationLocked(BaseError):
    template = (
        "Configuration is locked, use `rc.fork()` if you need to change "
        "configuration."
    )


class RequiredConfigOption(BaseError):
    template = "{option!r} is a required configuration option."


class InvalidPythonPath(BaseError):
    template = (
        "Can't import python path: {path!r}. Python path must be in "
        "'dotted.path:Name' form."
    )


class FieldAccessError(BaseError):
    """Named value can't be read from a source element.

    Error message becomes cell value, when raised while copying data into a
    table.
    """

    template = "Can't access {column!r} value."

    @property
    def column(self) -> Optional[str]:
        return self.context.get('column')


class NoSuchValueExists(FieldAccessError):
    template = "no such value exists: {column}"


class ErrorReadingValue(FieldAccessError):
    template = "error reading value: {column}"


class ColumnNotFound(FieldAccessError):
    template = "Column {column!r} does not belong to {this}."
