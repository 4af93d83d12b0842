from typing import Iterator, List, Optional, Tuple

import structlog

from django.db import DEFAULT_DB_ALIAS, connections

from pgpartsync.partitioning.reader import read_partitioning
from pgpartsync.partitioning.strategy import PostgresPartitioningStrategy
from pgpartsync.types import PostgresPartitioningMethod

LOGGER = structlog.get_logger(__name__)

PARTITIONING_STRATEGY_TO_METHOD = {
    "r": PostgresPartitioningMethod.RANGE,
    "l": PostgresPartitioningMethod.LIST,
    "h": PostgresPartitioningMethod.HASH,
}


def get_partitioning_method(
    cursor, table_name: str, schema: Optional[str] = None
) -> Optional[PostgresPartitioningMethod]:
    """Gets the method by which the specified table is partitioned.

    Returns:
        The partitioning method or None if the table does
        not exist or is not partitioned.
    """

    cursor.execute(
        """
        SELECT
            pg_partitioned_table.partstrat
        FROM
            pg_partitioned_table
        JOIN
            pg_class
        ON
            pg_class.oid = pg_partitioned_table.partrelid
        JOIN
            pg_namespace
        ON
            pg_namespace.oid = pg_class.relnamespace
        WHERE
            pg_class.relname = %s
            AND pg_namespace.nspname = COALESCE(%s, current_schema())
        """,
        (table_name, schema),
    )

    row = cursor.fetchone()
    if not row:
        return None

    return PARTITIONING_STRATEGY_TO_METHOD[row[0]]


def get_partition_key(
    cursor, table_name: str, schema: Optional[str] = None
) -> List[str]:
    """Gets the partition key for the specified partitioned table.

    Returns:
        A list of column names that are part of the
        partition key, in key order.
    """

    cursor.execute(
        """
        SELECT
            pg_attribute.attname
        FROM
            (SELECT partrelid,
                    unnest(partattrs) AS column_index,
                    generate_subscripts(partattrs, 1) AS key_position
             FROM pg_partitioned_table) pt
        JOIN
            pg_class
        ON
            pg_class.oid = pt.partrelid
        JOIN
            pg_namespace
        ON
            pg_namespace.oid = pg_class.relnamespace
        JOIN
            pg_attribute
        ON
            pg_attribute.attrelid = pt.partrelid
            AND pg_attribute.attnum = pt.column_index
        WHERE
            pg_class.relname = %s
            AND pg_namespace.nspname = COALESCE(%s, current_schema())
        ORDER BY
            pt.key_position
        """,
        (table_name, schema),
    )

    return [row[0] for row in cursor.fetchall()]


def get_partition_bounds(
    cursor, table_name: str, schema: Optional[str] = None
) -> Iterator[Tuple[str, str]]:
    """Gets the name and bound expression of every partition of the
    specified table.

    Rows are pulled from the cursor one at a time as the
    returned iterator is consumed.
    """

    cursor.execute(
        """
        SELECT
            child.relname,
            pg_get_expr(child.relpartbound, child.oid)
        FROM pg_inherits
        JOIN
            pg_class parent
        ON
            pg_inherits.inhparent = parent.oid
        JOIN
            pg_class child
        ON
            pg_inherits.inhrelid = child.oid
        JOIN
            pg_namespace nmsp_parent
        ON
            nmsp_parent.oid = parent.relnamespace
        WHERE
            parent.relname = %s
            AND nmsp_parent.nspname = COALESCE(%s, current_schema())
        """,
        (table_name, schema),
    )

    while True:
        row = cursor.fetchone()
        if row is None:
            return

        yield row[0], row[1]


def introspect_partitioning(
    table_name: str,
    schema: Optional[str] = None,
    using: str = DEFAULT_DB_ALIAS,
) -> Optional[PostgresPartitioningStrategy]:
    """Reads the partitioning scheme of the specified table from the
    database.

    Arguments:
        table_name:
            Name of the partitioned table.

        schema:
            Schema the table lives in. Defaults to the
            current schema.

        using:
            Name of the database connection to use.

    Returns:
        The partitioning scheme as it exists in the database or
        None if the table does not exist or is not partitioned.
    """

    with connections[using].cursor() as cursor:
        return read_partitioning_from_cursor(cursor, table_name, schema)


def read_partitioning_from_cursor(
    cursor, table_name: str, schema: Optional[str] = None
) -> Optional[PostgresPartitioningStrategy]:
    """Reads the partitioning scheme of the specified table using an
    already open cursor."""

    method = get_partitioning_method(cursor, table_name, schema)
    if not method:
        LOGGER.info(
            "Table is not partitioned", table_name=table_name, schema=schema
        )
        return None

    columns = get_partition_key(cursor, table_name, schema)
    return read_partitioning(
        method,
        table_name,
        columns,
        get_partition_bounds(cursor, table_name, schema),
    )


__all__ = [
    "get_partitioning_method",
    "get_partition_key",
    "get_partition_bounds",
    "introspect_partitioning",
    "read_partitioning_from_cursor",
]
