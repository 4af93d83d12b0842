import re

from dataclasses import dataclass

from .error import PostgresPartitionBoundParseError
from .partition import PostgresPartition, strip_parent_prefix

# one or more quoted strings, plain tokens or parenthesized groups,
# parentheses and quotes inside a quoted string do not count
BOUND_LITERAL = r"(?:'(?:[^']|'')*'|[^'()]|\((?:'(?:[^']|'')*'|[^'()])*\))+"

# what pg_get_expr(relpartbound, oid) reports for a range partition
RANGE_BOUNDS_PATTERN = re.compile(
    r"\s*FOR\s+VALUES\s+FROM\s*\((?P<from_literal>%s)\)\s*TO\s*\((?P<to_literal>%s)\)\s*"
    % (BOUND_LITERAL, BOUND_LITERAL),
    re.IGNORECASE | re.DOTALL,
)


@dataclass(frozen=True)
class PostgresRangePartition(PostgresPartition):
    """A partition in a range partitioned table.

    The bounds are kept as SQL literal text. Two partitions are only
    equal if their suffix and the literal text of both bounds match
    exactly. No attempt is made to compare the values the literals
    represent, `'2024-01-01'` and `'2024-01-01 00:00:00'` are
    different bounds.

    Attributes:
        suffix:
            Used to derive the name of the partition table,
            "{parent table name}_{suffix}".

        from_literal:
            Lower bound of the range, inclusive.

        to_literal:
            Upper bound of the range, exclusive.
    """

    suffix: str
    from_literal: str
    to_literal: str

    def bounds_sql(self) -> str:
        return f"FOR VALUES FROM ({self.from_literal}) TO ({self.to_literal})"

    def deconstruct(self) -> dict:
        return {
            **super().deconstruct(),
            "from": self.from_literal,
            "to": self.to_literal,
        }

    @classmethod
    def parse(
        cls, parent_name: str, partition_name: str, expression: str
    ) -> "PostgresRangePartition":
        """Re-creates a partition from the bound expression PostgreSQL
        reports for it.

        Arguments:
            parent_name:
                Name of the partitioned table.

            partition_name:
                Name of the partition table.

            expression:
                Bound expression, in the form of
                `FOR VALUES FROM (...) TO (...)`.

        Raises:
            PostgresPartitionBoundParseError:
                When the expression is not a range bound.
        """

        match = RANGE_BOUNDS_PATTERN.fullmatch(expression or "")
        if not match:
            raise PostgresPartitionBoundParseError(partition_name, expression)

        return cls(
            suffix=strip_parent_prefix(parent_name, partition_name),
            from_literal=match.group("from_literal").strip(),
            to_literal=match.group("to_literal").strip(),
        )


__all__ = ["PostgresRangePartition"]
