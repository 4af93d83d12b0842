from django.apps import AppConfig


class PostgresPartitionSyncAppConfig(AppConfig):
    name = "pgpartsync"
    verbose_name = "PostgreSQL Partition Sync"
