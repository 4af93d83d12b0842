from unittest.mock import MagicMock

import pytest

from pgpartsync.partitioning import (
    PostgresRangePartition,
    PostgresRangePartitioningStrategy,
)


@pytest.fixture
def ranges():
    """A couple of yearly ranges that tests can mix and match."""

    return {
        "y2022": PostgresRangePartition("y2022", "'2022-01-01'", "'2023-01-01'"),
        "y2023": PostgresRangePartition("y2023", "'2023-01-01'", "'2024-01-01'"),
        "y2024": PostgresRangePartition("y2024", "'2024-01-01'", "'2025-01-01'"),
        "y2025": PostgresRangePartition("y2025", "'2025-01-01'", "'2026-01-01'"),
    }


@pytest.fixture
def range_strategy():
    """Creates a range partitioning strategy from a list of partitions."""

    def _create(partitions, columns=("created_at",), **kwargs):
        return PostgresRangePartitioningStrategy(
            list(columns), list(partitions), **kwargs
        )

    return _create


@pytest.fixture
def fake_cursor():
    """Creates a fake database cursor that returns the specified rows from
    `fetchone` and `fetchall`."""

    def _create(fetchone=None, fetchall=None):
        cursor = MagicMock()
        cursor.fetchone.side_effect = list(fetchone or []) + [None]
        cursor.fetchall.return_value = list(fetchall or [])
        return cursor

    return _create
