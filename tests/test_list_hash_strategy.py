from pgpartsync.partitioning import (
    PostgresHashPartitioningStrategy,
    PostgresListPartitioningStrategy,
    PostgresRangePartitioningStrategy,
)
from pgpartsync.types import PostgresPartitionDelta


def _countries():
    return (
        PostgresListPartitioningStrategy(["country"])
        .add_list("benelux", "nl", "be", "lu")
        .add_list("ro", "ro")
    )


def test_list_delta_none_when_same():
    assert _countries().create_delta(_countries()).is_none


def test_list_delta_additive_when_list_added():
    desired = _countries().add_list("de", "de")

    delta = desired.create_delta(_countries())

    assert delta.delta == PostgresPartitionDelta.ADDITIVE
    assert [partition.suffix for partition in delta.missing] == ["de"]


def test_list_delta_rebuild_when_values_changed():
    actual = (
        PostgresListPartitioningStrategy(["country"])
        .add_list("benelux", "nl", "be")
        .add_list("ro", "ro")
    )

    assert _countries().create_delta(actual).is_rebuild


def test_list_delta_rebuild_when_method_changed():
    actual = PostgresRangePartitioningStrategy(["country"])

    assert _countries().create_delta(actual).is_rebuild


def test_hash_delta_none_when_same():
    desired = PostgresHashPartitioningStrategy(["id"], ["p0", "p1"])
    actual = PostgresHashPartitioningStrategy(["id"], ["p0", "p1"])

    assert desired.create_delta(actual).is_none


def test_hash_delta_rebuild_when_partition_added():
    """Tests whether adding a hash partition requires a rebuild since it
    changes the modulus of every partition."""

    desired = PostgresHashPartitioningStrategy(["id"], ["p0", "p1", "p2"])
    actual = PostgresHashPartitioningStrategy(["id"], ["p0", "p1"])

    delta = desired.create_delta(actual)

    assert delta.is_rebuild
    assert delta.missing == []


def test_hash_delta_ignoring_partitions():
    desired = PostgresHashPartitioningStrategy(["id"], ["p0", "p1", "p2"])
    actual = PostgresHashPartitioningStrategy(["id"], ["p0", "p1"])

    assert desired.create_delta(
        actual, ignore_partitions_in_migration=True
    ).is_none
    assert PostgresHashPartitioningStrategy(["tenant_id"], ["p0"]).create_delta(
        actual, ignore_partitions_in_migration=True
    ).is_rebuild
