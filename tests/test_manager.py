import os

import pytest

from sqlkeeper.manager import Database, DatabaseError, delete_database

CREATE_SQL = "CREATE TABLE test_table (id INTEGER PRIMARY KEY, name TEXT)"


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "test_database.db")


@pytest.fixture
def db():
    database = Database("test_connection")
    yield database
    database.close()


def test_open_database(db, db_path):
    db.open(db_path)
    assert db.is_open()
    assert db.name == db_path


def test_close_database(db, db_path):
    db.open(db_path)
    assert db.is_open()
    db.close()
    assert not db.is_open()
    assert db.name is None


def test_open_twice_reopens(db, tmp_path):
    first = str(tmp_path / "a.db")
    second = str(tmp_path / "b.db")
    db.open(first)
    db.execute_sql(CREATE_SQL)
    db.open(second)
    assert db.name == second
    assert db.table_exists("test_table") is False


def test_open_failure_raises(db, tmp_path):
    with pytest.raises(DatabaseError):
        db.open(str(tmp_path / "missing_dir" / "x.db"))
    assert not db.is_open()


def test_execute_sql(db, db_path):
    db.open(db_path)
    db.execute_sql(CREATE_SQL)
    assert db.table_exists("test_table")


def test_execute_query(db, db_path):
    db.open(db_path)
    db.execute_sql(CREATE_SQL)
    db.execute_query("INSERT INTO test_table (id, name) VALUES (1, 'Test')")
    assert db.execute_query("SELECT COUNT(*) FROM test_table") == [(1,)]


def test_execute_query_returns_rows(db, db_path):
    db.open(db_path)
    db.execute_sql(CREATE_SQL)
    db.execute_sql("INSERT INTO test_table (id, name) VALUES (1, 'Test')")
    assert db.execute_query("SELECT id, name FROM test_table") == [(1, "Test")]


def test_create_table(db, db_path):
    db.open(db_path)
    db.create_table(CREATE_SQL)
    assert db.table_exists("test_table")


def test_table_exists(db, db_path):
    db.open(db_path)
    assert not db.table_exists("test_table")
    db.create_table(CREATE_SQL)
    assert db.table_exists("test_table")


def test_drop_table(db, db_path):
    db.open(db_path)
    db.create_table(CREATE_SQL)
    assert db.table_exists("test_table")
    db.drop_table("test_table")
    assert not db.table_exists("test_table")


def test_drop_missing_table_raises(db, db_path):
    db.open(db_path)
    with pytest.raises(DatabaseError, match="does not exist"):
        db.drop_table("test_table")


def test_delete_database(db, db_path):
    db.open(db_path)
    db.close()
    assert os.path.exists(db_path)
    delete_database(db, db_path)
    assert not os.path.exists(db_path)
    with pytest.raises(DatabaseError, match="does not exist"):
        delete_database(db, db_path)


def test_delete_open_database_closes_it(db, db_path):
    db.open(db_path)
    delete_database(db, db_path)
    assert not db.is_open()
    assert not os.path.exists(db_path)


def test_delete_missing_database_raises(db, db_path):
    with pytest.raises(DatabaseError, match="does not exist"):
        delete_database(db, db_path)


def test_bad_sql_raises(db, db_path):
    db.open(db_path)
    with pytest.raises(DatabaseError, match="NOT A STATEMENT"):
        db.execute_sql("NOT A STATEMENT")


def test_duplicate_create_raises(db, db_path):
    db.open(db_path)
    db.create_table(CREATE_SQL)
    with pytest.raises(DatabaseError):
        db.create_table(CREATE_SQL)


@pytest.mark.parametrize(
    ("method", "args"),
    [
        ("execute_sql", (CREATE_SQL,)),
        ("execute_query", ("SELECT 1",)),
        ("create_table", (CREATE_SQL,)),
        ("drop_table", ("test_table",)),
        ("table_exists", ("test_table",)),
        ("tables", ()),
    ],
)
def test_operations_require_open_database(db, method, args):
    operation = getattr(db, method)
    with pytest.raises(DatabaseError) as excinfo:
        operation(*args)
    assert "not open" in str(excinfo.value)
    assert not db.is_open()


def test_tables_lists_created_tables(db, db_path):
    db.open(db_path)
    db.create_table(CREATE_SQL)
    db.create_table("CREATE TABLE other (x INTEGER)")
    assert sorted(db.tables()) == ["other", "test_table"]


def test_context_manager_closes(db_path):
    with Database("ctx") as database:
        database.open(db_path)
        assert database.is_open()
    assert not database.is_open()


def test_data_persists_across_reopen(db, db_path):
    db.open(db_path)
    db.create_table(CREATE_SQL)
    db.execute_sql("INSERT INTO test_table (id, name) VALUES (1, 'Test')")
    db.close()
    db.open(db_path)
    assert db.execute_query("SELECT name FROM test_table") == [("Test",)]