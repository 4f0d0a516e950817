"""A walk through the database manager on a small users table."""

from __future__ import annotations

import argparse
import logging
import os

from sqlkeeper.manager import Database, DatabaseError

__all__ = ["run_demo", "main"]

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "test_database.db"

_STEPS = [
    (
        "create",
        "CREATE TABLE IF NOT EXISTS users (id INTEGER PRIMARY KEY, name TEXT)",
        "Table 'users' created or already exists",
        "Failed to create table 'users'",
    ),
    (
        "sql",
        "INSERT INTO users (name) VALUES ('John Doe')",
        "Data inserted successfully",
        "Failed to insert data",
    ),
]


def _attempt(messages: list[str], action, success: str, failure: str) -> None:
    try:
        action()
    except DatabaseError as exc:
        logger.debug("%s", exc)
        messages.append(failure)
    else:
        messages.append(success)


def run_demo(path: str | os.PathLike[str] = DEFAULT_DATABASE) -> list[str]:
    """Create, fill, query, change and drop a users table; return the log."""
    messages: list[str] = []
    db = Database("test_connection")
    try:
        db.open(path)
    except DatabaseError as exc:
        logger.debug("%s", exc)
        return ["Failed to open the database"]
    messages.append("Database opened successfully")

    for kind, statement, success, failure in _STEPS:
        run = db.create_table if kind == "create" else db.execute_sql
        _attempt(messages, lambda: run(statement), success, failure)

    try:
        exists = db.table_exists("users")
    except DatabaseError:
        exists = False
    messages.append(
        "Table 'users' exists in the database" if exists else "Table 'users' does not exist"
    )

    try:
        rows = db.execute_query("SELECT * FROM users")
    except DatabaseError as exc:
        logger.debug("%s", exc)
        rows = []
    messages.extend(f"User ID: {user_id} Name: {name}" for user_id, name in rows)

    _attempt(
        messages,
        lambda: db.execute_sql(
            "UPDATE users SET name = 'Jane Doe' WHERE name = 'John Doe'"
        ),
        "Data updated successfully",
        "Failed to update data",
    )
    _attempt(
        messages,
        lambda: db.execute_sql("DELETE FROM users WHERE name = 'Jane Doe'"),
        "Data deleted successfully",
        "Failed to delete data",
    )
    _attempt(
        messages,
        lambda: db.drop_table("users"),
        "Table 'users' dropped successfully",
        "Failed to drop table 'users'",
    )

    db.close()
    messages.append("Database connection closed")
    return messages


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the database manager demo.")
    parser.add_argument(
        "database",
        nargs="?",
        default=DEFAULT_DATABASE,
        help="path of the SQLite database file",
    )
    args = parser.parse_args(argv)
    for message in run_demo(args.database):
        print(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())