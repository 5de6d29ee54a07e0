import datetime
import enum
import numbers
from uuid import UUID

# Values rendered as a single `Value` column instead of being inspected for
# named members.
SCALAR_TYPES = (
    numbers.Number,
    bytes,
    bytearray,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    UUID,
    enum.Enum,
)


def is_named_tuple(value: object) -> bool:
    return isinstance(value, tuple) and hasattr(value, '_fields')
