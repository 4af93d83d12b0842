import uuid

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pgpartsync.types import StrEnum

from .error import PostgresPartitioningError


class PostgresRangeBound(StrEnum):
    """Special values PostgreSQL accepts as the bound of a range partition to
    indicate it has no lower or upper limit."""

    MINVALUE = "MINVALUE"
    MAXVALUE = "MAXVALUE"


def format_sql_value(value: Any) -> str:
    """Formats the specified value as SQL literal text that can be embedded
    in a partition bound.

    Values that know how to render themselves can do so by implementing
    a method called `as_sql_literal` that returns the literal text.

    Lists and tuples are formatted as a comma separated list of
    literals, which is how multi-column bounds are written.

    Raises:
        PostgresPartitioningError:
            When the type of value is not supported.
    """

    as_sql_literal = getattr(value, "as_sql_literal", None)
    if callable(as_sql_literal):
        return as_sql_literal()

    if isinstance(value, PostgresRangeBound):
        return value.value

    if value is None:
        return "NULL"

    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, (int, float, Decimal)):
        return str(value)

    if isinstance(value, datetime):
        return _quote(value.isoformat(sep=" "))

    if isinstance(value, date):
        return _quote(value.isoformat())

    if isinstance(value, uuid.UUID):
        return _quote(str(value))

    if isinstance(value, str):
        return _quote(value)

    if isinstance(value, (list, tuple)):
        return ", ".join(format_sql_value(item) for item in value)

    raise PostgresPartitioningError(
        "Cannot format value of type '%s' as a SQL literal."
        % type(value).__name__
    )


def _quote(text: str) -> str:
    return "'%s'" % text.replace("'", "''")


__all__ = ["PostgresRangeBound", "format_sql_value"]
