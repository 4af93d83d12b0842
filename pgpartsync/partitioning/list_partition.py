import re

from dataclasses import dataclass

from .error import PostgresPartitionBoundParseError
from .partition import PostgresPartition, strip_parent_prefix

LIST_BOUNDS_PATTERN = re.compile(
    r"\s*FOR\s+VALUES\s+IN\s*\((?P<values_literal>.+)\)\s*",
    re.IGNORECASE | re.DOTALL,
)


@dataclass(frozen=True)
class PostgresListPartition(PostgresPartition):
    """A partition in a list partitioned table, holding the rows for which
    the partitioning key is one of the listed values."""

    suffix: str
    values_literal: str

    def bounds_sql(self) -> str:
        return f"FOR VALUES IN ({self.values_literal})"

    def deconstruct(self) -> dict:
        return {**super().deconstruct(), "values": self.values_literal}

    @classmethod
    def parse(
        cls, parent_name: str, partition_name: str, expression: str
    ) -> "PostgresListPartition":
        match = LIST_BOUNDS_PATTERN.fullmatch(expression or "")
        if not match:
            raise PostgresPartitionBoundParseError(partition_name, expression)

        return cls(
            suffix=strip_parent_prefix(parent_name, partition_name),
            values_literal=match.group("values_literal").strip(),
        )


__all__ = ["PostgresListPartition"]
