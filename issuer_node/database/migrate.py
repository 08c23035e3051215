"""Apply the packaged SQL migrations to the issuer database."""

import logging
import urllib.parse
from pathlib import Path

import psycopg
from yoyo import get_backend, read_migrations

from .error import DatabaseConnectionError, DialectError, MigrationError

LOGGER = logging.getLogger(__name__)

MIGRATIONS_PATH = Path(__file__).resolve().parent / "migrations"

DIALECT = "postgresql"
BACKEND_SCHEME = "postgresql+psycopg"
SUPPORTED_SCHEMES = ("postgres", "postgresql")


def backend_url(database_url: str) -> str:
    """Rewrite a PostgreSQL connection URL for the psycopg migration backend."""
    parsed = urllib.parse.urlparse(database_url)
    dialect = parsed.scheme.split("+", 1)[0].lower()
    if dialect not in SUPPORTED_SCHEMES:
        raise DialectError(
            f"Unsupported database dialect '{parsed.scheme or database_url}', "
            f"only {DIALECT} is supported"
        )
    try:
        parsed.port  # raises on a malformed port
    except ValueError as err:
        raise DatabaseConnectionError(
            f"Invalid database URL {redact_url(database_url)}"
        ) from err
    return parsed._replace(scheme=BACKEND_SCHEME).geturl()


def redact_url(database_url: str) -> str:
    """Strip credentials from a connection URL for logging."""
    parsed = urllib.parse.urlparse(database_url)
    netloc = parsed.netloc.rpartition("@")[2]
    return parsed._replace(netloc=netloc, query="").geturl()


def migrate(database_url: str, migrations_path: Path = MIGRATIONS_PATH):
    """Apply all pending migrations to the database at `database_url`.

    Scripts are applied in filename order while holding the migration lock.
    The connection is closed before returning.

    Raises:
        DialectError: If the URL does not target PostgreSQL
        DatabaseConnectionError: If the URL is malformed or the connection
            cannot be opened
        MigrationError: If the scripts cannot be read or applied

    """
    url = backend_url(database_url)

    try:
        backend = get_backend(url)
    except (psycopg.Error, ValueError) as err:
        raise DatabaseConnectionError(
            f"Error opening connection with database {redact_url(database_url)}"
        ) from err

    try:
        migrations = read_migrations(str(migrations_path))
        with backend.lock():
            pending = backend.to_apply(migrations)
            LOGGER.info(
                "Applying %d of %d migrations to %s",
                len(pending),
                len(migrations),
                redact_url(database_url),
            )
            backend.apply_migrations(pending)
    except Exception as err:
        raise MigrationError("Error trying to run migrations") from err
    finally:
        backend.connection.close()

    LOGGER.info("Database migrations complete")
