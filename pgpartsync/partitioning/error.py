class PostgresPartitioningError(RuntimeError):
    """Raised when the partitioning configuration is broken or a partitioning
    scheme cannot be built."""


class PostgresPartitionBoundParseError(PostgresPartitioningError):
    """Raised when the bound expression PostgreSQL reported for a partition
    could not be parsed."""

    def __init__(self, partition_name: str, expression: str) -> None:
        super().__init__(
            f"Cannot parse bounds of partition '{partition_name}': {expression!r}"
        )

        self.partition_name = partition_name
        self.expression = expression


__all__ = ["PostgresPartitioningError", "PostgresPartitionBoundParseError"]
