import os

from urllib.parse import urlparse


def _parse_db_url(url: str):
    parsed_url = urlparse(url)

    return {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': (parsed_url.path or '').strip('/') or "postgres",
        'HOST': parsed_url.hostname or None,
        'PORT': parsed_url.port or None,
        'USER': parsed_url.username or None,
        'PASSWORD': parsed_url.password or None,
    }


DEBUG = True

SECRET_KEY = 'this is my secret key'  # NOQA

TEST_RUNNER = 'django.test.runner.DiscoverRunner'

DATABASES = {
    'default': _parse_db_url(os.environ.get('DATABASE_URL', 'postgres:///pgpartsync')),
}

INSTALLED_APPS = (
    'pgpartsync',
)

USE_TZ = True
TIME_ZONE = 'UTC'

PGPARTSYNC_IGNORE_PARTITIONS_IN_MIGRATION = False
