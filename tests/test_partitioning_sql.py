from datetime import date

import pytest

from pgpartsync.partitioning import (
    PostgresHashPartitioningStrategy,
    PostgresListPartitioningStrategy,
    PostgresPartitioningError,
    PostgresRangePartition,
    PostgresRangePartitioningStrategy,
)


def _yearly_strategy():
    return (
        PostgresRangePartitioningStrategy(["created_at"])
        .add_range("y2023", date(2023, 1, 1), date(2024, 1, 1))
        .add_range("Y2024", date(2024, 1, 1), date(2025, 1, 1))
    )


def test_partitioning_strategy_needs_columns():
    with pytest.raises(PostgresPartitioningError):
        PostgresRangePartitioningStrategy([])


def test_range_partition_by_sql():
    strategy = PostgresRangePartitioningStrategy(["tenant_id", "region"])

    assert (
        strategy.partition_by_sql()
        == ") PARTITION BY RANGE (tenant_id, region);\n"
    )


def test_list_and_hash_partition_by_sql():
    assert (
        PostgresListPartitioningStrategy(["country"]).partition_by_sql()
        == ") PARTITION BY LIST (country);\n"
    )
    assert (
        PostgresHashPartitioningStrategy(["id"]).partition_by_sql()
        == ") PARTITION BY HASH (id);\n"
    )


def test_range_add_range_formats_literals():
    strategy = _yearly_strategy()

    assert strategy.ranges == [
        PostgresRangePartition("y2023", "'2023-01-01'", "'2024-01-01'"),
        PostgresRangePartition("Y2024", "'2024-01-01'", "'2025-01-01'"),
    ]


def test_range_create_sql():
    strategy = _yearly_strategy()

    assert strategy.create_sql("Orders") == (
        "CREATE TABLE orders_y2023 PARTITION OF Orders "
        "FOR VALUES FROM ('2023-01-01') TO ('2024-01-01');\n"
        "CREATE TABLE orders_y2024 PARTITION OF Orders "
        "FOR VALUES FROM ('2024-01-01') TO ('2025-01-01');\n"
        "CREATE TABLE orders_default PARTITION OF Orders DEFAULT;\n"
    )


def test_range_create_sql_without_ranges_creates_default():
    strategy = PostgresRangePartitioningStrategy(["created_at"])

    assert strategy.create_sql("orders", "sales") == (
        "CREATE TABLE sales.orders_default PARTITION OF sales.orders DEFAULT;\n"
    )


def test_range_partition_table_names():
    strategy = _yearly_strategy()

    names = strategy.partition_table_names("Orders")

    assert names == ["orders_y2023", "orders_y2024", "orders_default"]
    assert len(names) == len(strategy.ranges) + 1
    assert names[-1] == "orders_default"


def test_list_create_sql():
    strategy = (
        PostgresListPartitioningStrategy(["country"])
        .add_list("benelux", "nl", "be", "lu")
        .add_list("ro", "ro")
    )

    assert strategy.create_sql("customers") == (
        "CREATE TABLE customers_benelux PARTITION OF customers "
        "FOR VALUES IN ('nl', 'be', 'lu');\n"
        "CREATE TABLE customers_ro PARTITION OF customers "
        "FOR VALUES IN ('ro');\n"
        "CREATE TABLE customers_default PARTITION OF customers DEFAULT;\n"
    )


def test_hash_create_sql_has_no_default():
    strategy = PostgresHashPartitioningStrategy(["id"], ["p0", "p1", "p2"])

    assert strategy.create_sql("events") == (
        "CREATE TABLE events_p0 PARTITION OF events "
        "FOR VALUES WITH (MODULUS 3, REMAINDER 0);\n"
        "CREATE TABLE events_p1 PARTITION OF events "
        "FOR VALUES WITH (MODULUS 3, REMAINDER 1);\n"
        "CREATE TABLE events_p2 PARTITION OF events "
        "FOR VALUES WITH (MODULUS 3, REMAINDER 2);\n"
    )
    assert strategy.partition_table_names("events") == [
        "events_p0",
        "events_p1",
        "events_p2",
    ]


def test_range_create_sql_parses_back_to_same_bounds():
    """Tests whether the bounds in the generated statements are read back
    exactly as declared."""

    strategy = (
        PostgresRangePartitioningStrategy(["tenant_id", "created_at"])
        .add_range("a", (1, date(2023, 1, 1)), (1, date(2024, 1, 1)))
        .add_range("b", "O'Brien", "Smith")
        .add_range("c", 10, 20)
        .add_range("d", "a) TO (b", "z")
        .add_range("e", "a", "x) TO (y")
    )

    statements = strategy.create_sql("orders").splitlines()[:-1]

    parsed = [
        PostgresRangePartition.parse(
            "orders",
            statement.split(" ")[2],
            statement[statement.index("FOR VALUES") :].rstrip(";"),
        )
        for statement in statements
    ]

    assert parsed == strategy.ranges
