import os

import pytest

POSTGRES_URL = None


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "postgres: test requires a PostgreSQL database (POSTGRES_URL)"
    )


def pytest_sessionstart(session):
    global POSTGRES_URL

    POSTGRES_URL = os.getenv("POSTGRES_URL")


def pytest_runtest_setup(item: pytest.Item):
    if tuple(item.iter_markers(name="postgres")) and not POSTGRES_URL:
        pytest.skip("test requires Postgres support")
