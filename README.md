# sqlkeeper

sqlkeeper wraps one SQLite connection. With it you can open a database file, run
statements, create, check and drop tables, and delete the file when you no longer need it.
It uses only the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
from sqlkeeper.manager import Database, DatabaseError, delete_database

db = Database("main")
db.open("example.db")

db.create_table("CREATE TABLE IF NOT EXISTS users (id INTEGER PRIMARY KEY, name TEXT)")
db.execute_sql("INSERT INTO users (name) VALUES ('John Doe')")

rows = db.execute_query("SELECT id, name FROM users")   # [(1, 'John Doe')]
assert db.table_exists("users")
print(db.tables())

db.drop_table("users")
db.close()

delete_database(db, "example.db")
```

`Database` also works as a context manager. The connection is closed when the block exits:

```python
with Database("main") as db:
    db.open("example.db")
    db.execute_sql("CREATE TABLE t (x INTEGER)")
```

### `Database`

- `Database(connection_name="default")` creates a closed connection. `connection_name` is
  a label that is kept on the object and shown in its `repr`.
- `open(name)` opens the SQLite file at the path `name`. If a file is already open, it is
  closed first. The path is stored in `db.name`.
- `close()` closes the connection and resets `db.name` to `None`. Calling it on a closed
  database does nothing.
- `is_open()` reports whether a connection is open.
- `tables()` returns the names of all tables, including temporary tables.
- `table_exists(table_name)` checks whether `table_name` is among `tables()`.
- `execute_sql(sql)` runs one SQL statement.
- `execute_query(query)` runs one SQL statement and returns its rows as a list of tuples.
- `create_table(table_script)` runs a table creation statement.
- `drop_table(table_name)` drops an existing table.

Statements run in autocommit mode, so each one takes effect immediately. Each call runs a
single statement.

### `delete_database(db, name)`

Removes the database file at `name`. If `db` has that same file open, it is closed first.

### Errors

Every failure raises `sqlkeeper.manager.DatabaseError`. For example:

- opening a file that SQLite cannot open
- using a database that is not open
- SQL that SQLite rejects (the message includes the statement)
- dropping a table that does not exist
- deleting a database file that is missing or cannot be removed

## Demo

The demo opens a database and creates a `users` table. It inserts a row, selects it,
updates it and deletes it, then drops the table and closes the connection. It prints a
line for each step:

```
sqlkeeper-demo
```

By default it uses `test_database.db` in the current directory. To use another file, pass
its path:

```
sqlkeeper-demo other.db
```

The demo does not delete the database file afterwards.

From Python, `sqlkeeper.demo.run_demo(path)` runs the same steps and returns the lines as
a list of strings. `sqlkeeper.demo.main(argv)` is the command-line entry point.

## What it does not do

sqlkeeper works only with SQLite files. It keeps no registry or pool of connections:
`connection_name` is only a label, and each `Database` object holds its own single
connection.

## Tests

```
pytest
```