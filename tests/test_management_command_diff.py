from unittest import mock

import pytest

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from pgpartsync.partitioning import (
    PostgresPartitionedTable,
    PostgresRangePartition,
    PostgresRangePartitioningStrategy,
)

INTROSPECT_PATH = (
    "pgpartsync.management.commands.pgpartitiondiff.introspect_partitioning"
)


def declared_tables():
    return [
        PostgresPartitionedTable(
            "orders",
            PostgresRangePartitioningStrategy(["created_at"])
            .add_range("y2023", "2023-01-01", "2024-01-01")
            .add_range("y2024", "2024-01-01", "2025-01-01"),
        ),
        PostgresPartitionedTable(
            "invoices",
            PostgresRangePartitioningStrategy(["issued_at"]).add_range(
                "y2023", "2023-01-01", "2024-01-01"
            ),
        ),
    ]


def _actual_strategies(table_name, schema=None, using="default"):
    if table_name == "orders":
        return PostgresRangePartitioningStrategy(
            ["created_at"],
            [PostgresRangePartition("y2023", "'2023-01-01'", "'2024-01-01'")],
            has_existing_default=True,
        )

    return PostgresRangePartitioningStrategy(
        ["issued_at"],
        [PostgresRangePartition("y2023", "'2023-01-01'", "'2024-01-01'")],
    )


@pytest.fixture
def fake_introspection():
    with mock.patch(INTROSPECT_PATH, side_effect=_actual_strategies) as patched:
        yield patched


@override_settings(PGPARTSYNC_PARTITIONED_TABLES=declared_tables())
def test_management_command_diff_reports_drift(capsys, fake_introspection):
    call_command("pgpartitiondiff")

    output = capsys.readouterr().out
    assert "orders: additive" in output
    assert "  + y2024" in output
    assert "invoices:" not in output
    assert "1 tables drifted" in output
    assert "CREATE TABLE" not in output

    fake_introspection.assert_any_call(
        "orders", schema=None, using="default"
    )


@override_settings(
    PGPARTSYNC_PARTITIONED_TABLES="tests.test_management_command_diff.declared_tables"
)
def test_management_command_diff_sql(capsys, fake_introspection):
    call_command("pgpartitiondiff", sql=True, using="other")

    output = capsys.readouterr().out
    assert (
        "CREATE TABLE orders_y2024 PARTITION OF orders "
        "FOR VALUES FROM ('2024-01-01') TO ('2025-01-01');\n"
    ) in output
    assert "orders_y2023 PARTITION OF" not in output

    fake_introspection.assert_any_call(
        "invoices", schema=None, using="other"
    )


@override_settings(
    PGPARTSYNC_PARTITIONED_TABLES=[
        PostgresPartitionedTable(
            "events", PostgresRangePartitioningStrategy(["id"]).add_range("a", 1, 2)
        )
    ]
)
def test_management_command_diff_rebuild_when_not_partitioned(capsys):
    with mock.patch(INTROSPECT_PATH, return_value=None):
        call_command("pgpartitiondiff", sql=True)

    output = capsys.readouterr().out
    assert "events: rebuild" in output
    assert "CREATE TABLE events_a PARTITION OF events" in output
    assert "CREATE TABLE events_default PARTITION OF events DEFAULT;" in output


@override_settings(PGPARTSYNC_PARTITIONED_TABLES=declared_tables())
def test_management_command_diff_fail_on_drift(fake_introspection):
    with pytest.raises(CommandError) as exc_info:
        call_command("pgpartitiondiff", fail_on_drift=True)

    assert "orders" in str(exc_info.value)


@override_settings(PGPARTSYNC_PARTITIONED_TABLES=declared_tables()[1:])
def test_management_command_diff_nothing_to_be_done(
    capsys, fake_introspection
):
    call_command("pgpartitiondiff", fail_on_drift=True)

    assert "Nothing to be done." in capsys.readouterr().out


@override_settings(PGPARTSYNC_PARTITIONED_TABLES=None)
def test_management_command_diff_not_configured():
    with pytest.raises(CommandError):
        call_command("pgpartitiondiff")


@override_settings(
    PGPARTSYNC_PARTITIONED_TABLES="tests.test_management_command_diff.does_not_exist"
)
def test_management_command_diff_bad_tables_path():
    with pytest.raises(CommandError) as exc_info:
        call_command("pgpartitiondiff")

    assert "PGPARTSYNC_PARTITIONED_TABLES" in str(exc_info.value)
