import json
import re

import pytest

from tapschema.alter import get_avro_schema_from_alter_table, mutate_table
from tapschema.table_schema import NoTableError


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rows = []

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        self.rows = list(self.conn.respond(sql, params))

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return list(self.rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, respond):
        self.respond = respond
        self.executed = []

    def cursor(self):
        return FakeCursor(self)

    def statements(self):
        return [sql for sql, _ in self.executed]


ROWS = [
    ("bi", 1, "NO", "bigint", None, 19, 0, "bigint(20)", "PRI"),
    ("vc", 2, "YES", "varchar", 32, None, None, "varchar(32)", ""),
]
ROWS_ALTERED = ROWS + [("f111", 3, "YES", "bigint", None, 19, 0, "bigint(20)", "")]


def test_get_avro_schema_from_alter_table():
    def respond(sql, params):
        if sql.startswith("SELECT") and params == ("db", "test_schema"):
            return ROWS
        return []

    conn = FakeConnection(respond)
    data = get_avro_schema_from_alter_table(
        conn, "db", "test_schema", "ALTER TABLE db.test_schema ADD f111  BIGINT"
    )
    stmts = conn.statements()
    m = re.fullmatch(r"CREATE TEMPORARY TABLE (db\.tmptbl_\d+) LIKE db\.test_schema", stmts[0])
    assert m
    temp = m.group(1)
    assert stmts[1] == f"ALTER TABLE {temp} ADD f111  BIGINT"
    assert stmts[-1] == f"DROP TEMPORARY TABLE {temp}"
    doc = json.loads(data)
    assert doc["name"] == "db_test_schema"
    assert [f["name"] for f in doc["fields"]] == ["bi", "vc", "ref_key", "row_key", "is_deleted"]


def test_get_avro_schema_from_alter_create_fails():
    def respond(sql, params):
        if sql.startswith("CREATE TEMPORARY"):
            raise ConnectionError("no db")
        return []

    conn = FakeConnection(respond)
    with pytest.raises(ConnectionError):
        get_avro_schema_from_alter_table(conn, "db", "t", "ALTER TABLE db.t ADD x INT")
    assert len(conn.executed) == 1


def test_get_avro_schema_from_alter_missing_table():
    conn = FakeConnection(lambda sql, params: [])
    with pytest.raises(NoTableError):
        get_avro_schema_from_alter_table(conn, "db", "t", "ALTER TABLE db.t ADD x INT")


def test_mutate_table():
    raw = "(\n  `bi` bigint(20) NOT NULL,\n  `vc` varchar(32)\n) ENGINE=InnoDB"
    new_raw = "(\n  `bi` bigint(20) NOT NULL,\n  `vc` varchar(32),\n  `f111` bigint(20)\n) ENGINE=InnoDB"

    def respond(sql, params):
        if sql.startswith("SHOW CREATE TABLE"):
            return [("x", "CREATE TABLE `x` " + new_raw)]
        if sql.startswith("SELECT") and params and params[0] == "state":
            return ROWS_ALTERED
        return []

    conn = FakeConnection(respond)
    schema, result_raw = mutate_table(
        conn, "svc", "db", "test_schema", " ADD f111  BIGINT", raw, "state"
    )
    assert result_raw == new_raw
    assert schema.db_name == "db"
    assert schema.table_name == "test_schema"
    assert [c.name for c in schema.columns] == ["bi", "vc", "f111"]
    assert schema.columns[0].key == "PRI"

    stmts = conn.statements()
    m = re.match(r"CREATE TABLE (`state`\.`([0-9a-f-]+)`)", stmts[0])
    assert m
    full, tmp = m.group(1), m.group(2)
    assert stmts[0] == f"CREATE TABLE {full}{raw} COMMENT='svc_db_test_schema'"
    assert stmts[1] == f"ALTER TABLE {full}  ADD f111  BIGINT"
    assert stmts[2] == f"SHOW CREATE TABLE {full}"
    assert conn.executed[3][1] == ("state", tmp)
    assert stmts[-1] == f"DROP TABLE {full}"


def test_mutate_table_alter_fails():
    def respond(sql, params):
        if sql.startswith("ALTER"):
            raise RuntimeError("syntax error")
        return []

    conn = FakeConnection(respond)
    with pytest.raises(RuntimeError, match="syntax error"):
        mutate_table(conn, "svc", "db", "t", "BROKEN", "(a int)", "state")
    assert not any(s.startswith("DROP") for s in conn.statements())