"""Management of SQLite database connections, tables and files."""

from __future__ import annotations

import os
import sqlite3
from types import TracebackType

__all__ = ["DatabaseError", "Database", "delete_database"]


class DatabaseError(Exception):
    """Raised when a database operation cannot be carried out."""


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class Database:
    """A named SQLite connection that can be opened, used and closed."""

    def __init__(self, connection_name: str = "default") -> None:
        self.connection_name = connection_name
        self.name: str | None = None
        self._connection: sqlite3.Connection | None = None

    def __enter__(self) -> Database:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self.is_open() else "closed"
        return f"Database({self.connection_name!r}, name={self.name!r}, {state})"

    def open(self, name: str | os.PathLike[str]) -> None:
        """Open the database file, closing any file already open first."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
        path = os.fspath(name)
        try:
            self._connection = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as exc:
            self.name = None
            raise DatabaseError(f"Error opening database: {exc}") from exc
        self.name = path

    def close(self) -> None:
        """Close the connection and forget the database name."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            self.name = None

    def is_open(self) -> bool:
        return self._connection is not None

    def _require_open(self) -> sqlite3.Connection:
        if self._connection is None:
            raise DatabaseError("Database is not open")
        return self._connection

    def tables(self) -> list[str]:
        """Names of the tables in the database, temporary ones included."""
        connection = self._require_open()
        rows = connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' "
            "UNION ALL "
            "SELECT name FROM sqlite_temp_master WHERE type = 'table'"
        ).fetchall()
        return [row[0] for row in rows]

    def _run(self, statement: str, what: str) -> list[tuple]:
        connection = self._require_open()
        try:
            return connection.execute(statement).fetchall()
        except (sqlite3.Error, sqlite3.Warning) as exc:
            raise DatabaseError(
                f"Error executing {what}: {exc}; query was: {statement}"
            ) from exc

    def execute_sql(self, sql: str) -> None:
        """Execute one SQL statement."""
        self._run(sql, "SQL")

    def execute_query(self, query: str) -> list[tuple]:
        """Execute one SQL statement and return the rows it produced."""
        return self._run(query, "query")

    def create_table(self, table_script: str) -> None:
        """Run a table creation script."""
        self._require_open()
        self.execute_sql(table_script)

    def drop_table(self, table_name: str) -> None:
        """Drop an existing table; raise if there is no such table."""
        self._require_open()
        if not self.table_exists(table_name):
            raise DatabaseError(f"Table does not exist: {table_name}")
        self.execute_sql(f"DROP TABLE {_quote_identifier(table_name)}")

    def table_exists(self, table_name: str) -> bool:
        return table_name in self.tables()


def delete_database(db: Database, name: str | os.PathLike[str]) -> None:
    """Delete a database file, closing ``db`` first if it has that file open."""
    path = os.fspath(name)
    if db.is_open() and db.name == path:
        db.close()
    if not os.path.exists(path):
        raise DatabaseError(f"Database file does not exist: {path}")
    try:
        os.remove(path)
    except OSError as exc:
        raise DatabaseError(f"Failed to delete database file: {exc}") from exc