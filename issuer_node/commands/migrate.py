"""Migrate command for bringing the issuer database schema up to date."""

from typing import Mapping, Sequence

from configargparse import ArgumentParser

from ..config import argparse as arg
from ..config.settings import Settings
from ..config.util import common_config
from ..core.error import BaseError
from ..database.error import DatabaseError
from ..database.migrate import migrate

from . import PROG


class MigrateError(BaseError):
    """Base exception for migration command errors."""


def init_argument_parser(parser: ArgumentParser):
    """Initialize an argument parser with the module's arguments."""
    return arg.load_argument_groups(parser, *arg.group.get_registered(arg.CAT_MIGRATE))


def run_migrations(settings: Mapping[str, object]):
    """Apply pending migrations to the configured database."""
    try:
        migrate(settings["database.url"])
    except DatabaseError as e:
        raise MigrateError("Error during database migration") from e


def execute(argv: Sequence[str] = None):
    """Entrypoint."""
    parser = arg.create_argument_parser(prog=PROG)
    parser.prog += " migrate"
    get_settings = init_argument_parser(parser)
    args = parser.parse_args(argv)
    settings = Settings(get_settings(args))
    common_config(settings)

    run_migrations(settings)


def main():
    """Execute the main line."""
    if __name__ == "__main__":
        execute()


main()
