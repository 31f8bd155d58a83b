from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from httpulse.database.connection import get_connection
from httpulse.database.exceptions import PersistenceError, RecordNotFoundError
from httpulse.database.models import EnvironmentRecord
from httpulse.errors.dispatcher import subsystem_call


class EnvironmentRepository:
    """Database operations for the environments table.

    Every public method raises NormalizedError with the persistence category
    on driver failures or missing rows.
    """

    def find_by_id(self, environment_id: int) -> EnvironmentRecord:
        with get_connection() as conn, subsystem_call():
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, name, variables, created_at, updated_at
                    FROM environments
                    WHERE id = %s
                    """,
                    (environment_id,),
                )
                row = cur.fetchone()
            if row is None:
                raise RecordNotFoundError("record not found")

        return EnvironmentRecord(
            id=row["id"],
            name=row["name"],
            variables=dict(row["variables"] or {}),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def create(self, name: str, variables: dict[str, str] | None = None) -> int:
        """Insert an environment and return its ID."""
        with get_connection() as conn, subsystem_call():
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO environments (name, variables, created_at, updated_at)
                    VALUES (%s, %s, NOW(), NOW())
                    RETURNING id
                    """,
                    (name, Jsonb(variables or {})),
                )
                row = cur.fetchone()
            if row is None:
                raise PersistenceError("insert returned no id")
            conn.commit()
        return int(row[0])

    def save_variables(self, environment_id: int, variables: dict[str, str]) -> None:
        with get_connection() as conn, subsystem_call():
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE environments
                    SET variables = %s, updated_at = NOW()
                    WHERE id = %s
                    """,
                    (Jsonb(variables), environment_id),
                )
                if cur.rowcount == 0:
                    raise RecordNotFoundError("record not found")
            conn.commit()

    def delete(self, environment_id: int) -> None:
        with get_connection() as conn, subsystem_call():
            cur = conn.execute("DELETE FROM environments WHERE id = %s", (environment_id,))
            if cur.rowcount == 0:
                raise RecordNotFoundError("record not found")
            conn.commit()
