from abc import abstractmethod
from typing import Optional

DEFAULT_PARTITION_SUFFIX = "default"


def create_partition_table_name(parent_name: str, suffix: str) -> str:
    """Creates the name of the table that holds a partition.

    Partition table names are always lower-cased, regardless of how
    the parent table was named.
    """

    return f"{parent_name.lower()}_{suffix.lower()}"


def qualify(name: str, schema: Optional[str] = None) -> str:
    """Prefixes the specified table name with the schema, if there is one."""

    if schema:
        return f"{schema}.{name}"

    return name


def strip_parent_prefix(parent_name: str, partition_name: str) -> str:
    """Recovers the suffix of a partition from its table name.

    The prefix is matched the way :see:create_partition_table_name
    writes it, lower-cased.
    """

    prefix = f"{parent_name.lower()}_"
    if partition_name.lower().startswith(prefix):
        return partition_name[len(prefix) :]

    return partition_name


class PostgresPartition:
    """Base class for a PostgreSQL table partition."""

    suffix: str

    def table_name(self, parent_name: str) -> str:
        """Gets the name of the table that holds this partition."""

        return create_partition_table_name(parent_name, self.suffix)

    @abstractmethod
    def bounds_sql(self) -> str:
        """Renders the bound specification of this partition.

        This is the same text PostgreSQL reports when asked for
        the partition bound expression.
        """

    def create_sql(self, parent_name: str, schema: Optional[str] = None) -> str:
        """Renders the statement that creates this partition."""

        return "CREATE TABLE %s PARTITION OF %s %s;\n" % (
            qualify(self.table_name(parent_name), schema),
            qualify(parent_name, schema),
            self.bounds_sql(),
        )

    def deconstruct(self) -> dict:
        """Deconstructs this partition into a dict of attributes/fields."""

        return {"suffix": self.suffix}


def create_default_partition_sql(
    parent_name: str, schema: Optional[str] = None
) -> str:
    """Renders the statement that creates the default partition, the
    partition rows are routed to when no other partition matches."""

    return "CREATE TABLE %s PARTITION OF %s DEFAULT;\n" % (
        qualify(
            create_partition_table_name(parent_name, DEFAULT_PARTITION_SUFFIX),
            schema,
        ),
        qualify(parent_name, schema),
    )


__all__ = [
    "PostgresPartition",
    "DEFAULT_PARTITION_SUFFIX",
    "create_partition_table_name",
    "create_default_partition_sql",
    "strip_parent_prefix",
    "qualify",
]
