import enum


class Shape(enum.Enum):
    """Runtime shape of a source value or of a single source element."""

    # A tabular view, columns are taken from the underlying table.
    view = 'view'

    # A row of a tabular view or of a query result.
    row = 'row'

    # A list of elements, only the first element is inspected, when
    # discovering columns.
    list = 'list'

    # Numbers and other single values, rendered as one `Value` column.
    scalar = 'scalar'

    # Strings, rendered as one `Text` column.
    text = 'text'

    # Any other object, columns are readable properties and public fields.
    record = 'record'
