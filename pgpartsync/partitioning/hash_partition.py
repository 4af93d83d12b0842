import re

from dataclasses import dataclass

from .error import PostgresPartitionBoundParseError
from .partition import PostgresPartition, strip_parent_prefix

HASH_BOUNDS_PATTERN = re.compile(
    r"\s*FOR\s+VALUES\s+WITH\s*\(\s*MODULUS\s+(?P<modulus>\d+)\s*,\s*REMAINDER\s+(?P<remainder>\d+)\s*\)\s*",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class PostgresHashPartition(PostgresPartition):
    """A partition in a hash partitioned table, holding the rows for which
    the hash of the partitioning key divided by the modulus leaves the
    remainder."""

    suffix: str
    modulus: int
    remainder: int

    def bounds_sql(self) -> str:
        return "FOR VALUES WITH (MODULUS %s, REMAINDER %s)" % (
            self.modulus,
            self.remainder,
        )

    def deconstruct(self) -> dict:
        return {
            **super().deconstruct(),
            "modulus": self.modulus,
            "remainder": self.remainder,
        }

    @classmethod
    def parse(
        cls, parent_name: str, partition_name: str, expression: str
    ) -> "PostgresHashPartition":
        match = HASH_BOUNDS_PATTERN.fullmatch(expression or "")
        if not match:
            raise PostgresPartitionBoundParseError(partition_name, expression)

        return cls(
            suffix=strip_parent_prefix(parent_name, partition_name),
            modulus=int(match.group("modulus")),
            remainder=int(match.group("remainder")),
        )


__all__ = ["PostgresHashPartition"]
