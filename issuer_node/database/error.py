"""Database errors."""

from ..core.error import BaseError


class DatabaseError(BaseError):
    """Base class for database errors."""


class DatabaseConnectionError(DatabaseError):
    """The database connection could not be opened."""


class DialectError(DatabaseError):
    """The connection URL does not target a supported SQL dialect."""


class MigrationError(DatabaseError):
    """The migration scripts could not be applied."""
