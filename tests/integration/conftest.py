import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from httpulse.config.settings import Settings
from httpulse.database.connection import close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "httpulse_test")
    os.environ.setdefault("DB_CONNECT_TIMEOUT_SECONDS", "3")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS environments (
                    id SERIAL PRIMARY KEY,
                    name TEXT NOT NULL,
                    variables JSONB NOT NULL DEFAULT '{}'::jsonb,
                    created_at TIMESTAMPTZ,
                    updated_at TIMESTAMPTZ
                )
                """
            )
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[int], None, None]:
    cleanup: list[int] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for environment_id in cleanup:
                cur.execute("DELETE FROM environments WHERE id = %s", (environment_id,))
        conn.commit()
