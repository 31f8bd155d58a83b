from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from httpulse.config.settings import Settings
from httpulse.errors.dispatcher import subsystem_call

_pool: ConnectionPool | None = None


def init_pool(settings: Settings) -> None:
    """Initialize the global connection pool from settings."""
    global _pool  # noqa: PLW0603
    conninfo = (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )
    with subsystem_call():
        pool = ConnectionPool(conninfo, min_size=1, max_size=4, open=True)
        try:
            pool.wait(timeout=settings.db_connect_timeout_seconds)
        except Exception:
            pool.close()
            raise
    _pool = pool


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a pooled connection. Pool failures surface as persistence errors."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with subsystem_call():
        with _pool.connection() as conn:
            yield conn
