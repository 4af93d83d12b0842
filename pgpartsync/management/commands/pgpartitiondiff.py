from typing import List, Optional

import structlog

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils.module_loading import import_string

from pgpartsync.backend.introspection import introspect_partitioning
from pgpartsync.partitioning import (
    PostgresPartitionedTable,
    PostgresPartitioningDelta,
    PostgresPartitioningError,
)
from pgpartsync.types import PostgresPartitionDelta

LOGGER = structlog.get_logger(__name__)


class Command(BaseCommand):
    """Compares the declared partitioning of tables against the database and
    reports what would have to change."""

    help = "Reports which partitioned tables drifted from their declared partitioning. The PGPARTSYNC_PARTITIONED_TABLES setting must be configured."

    def add_arguments(self, parser):
        parser.add_argument(
            "--using",
            "-u",
            help="Name of the database connection to use.",
            default="default",
        )

        parser.add_argument(
            "--sql",
            action="store_true",
            help="Print the SQL that creates missing partitions. For tables that need a rebuild, print the SQL that creates all partitions.",
            required=False,
            default=False,
        )

        parser.add_argument(
            "--fail-on-drift",
            action="store_true",
            help="Exit with an error when any table does not match its declared partitioning.",
            required=False,
            default=False,
        )

    def handle(
        self,
        using: Optional[str],
        sql: bool,
        fail_on_drift: bool,
        *args,
        **kwargs,
    ):
        try:
            tables = self._partitioned_tables()
        except PostgresPartitioningError as e:
            raise CommandError(str(e)) from e

        drifted = []

        for table in tables:
            delta = self._delta_for_table(table, using or "default")
            LOGGER.info(
                "Compared partitioning",
                table_name=table.qualified_name,
                delta=str(delta.delta),
                missing=len(delta.missing),
            )

            if delta.is_none:
                continue

            drifted.append(delta)
            delta.print()

            if not sql:
                continue

            if delta.is_additive:
                print(delta.sql(table.name, table.schema), end="")
            else:
                print(table.create_partitions_sql(), end="")

        if not drifted:
            print("Nothing to be done.")
            return

        print(f"{len(drifted)} tables drifted from their declared partitioning")

        if fail_on_drift:
            raise CommandError(
                "Partitioning drifted for: %s"
                % ", ".join(delta.table_name or "" for delta in drifted)
            )

    @staticmethod
    def _delta_for_table(
        table: PostgresPartitionedTable, using: str
    ) -> PostgresPartitioningDelta:
        actual = introspect_partitioning(
            table.name, schema=table.schema, using=using
        )
        if not actual:
            # the table does not exist yet or is not partitioned
            return PostgresPartitioningDelta(
                PostgresPartitionDelta.REBUILD, table_name=table.qualified_name
            )

        return table.create_delta(actual)

    @staticmethod
    def _partitioned_tables() -> List[PostgresPartitionedTable]:
        tables = getattr(settings, "PGPARTSYNC_PARTITIONED_TABLES", None)
        if not tables:
            raise PostgresPartitioningError(
                "You must configure the PGPARTSYNC_PARTITIONED_TABLES setting "
                "to compare partitioning."
            )

        if isinstance(tables, str):
            try:
                tables = import_string(tables)
            except ImportError as e:
                raise PostgresPartitioningError(
                    "Cannot import PGPARTSYNC_PARTITIONED_TABLES: %s" % e
                ) from e

        if callable(tables):
            tables = tables()

        return list(tables)
