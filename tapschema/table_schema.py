"""Loading table schemas from a MySQL-compatible DB-API connection."""

from __future__ import annotations

import logging
from contextlib import closing
from typing import Any

from .models import ColumnSchema, TableSchema

log = logging.getLogger(__name__)


class NoTableError(LookupError):
    """Raised when the requested table does not exist."""


def has_primary_key(schema: TableSchema) -> bool:
    """Return True if any column of the table is part of the primary key."""
    return any(c.key == "PRI" for c in schema.columns)


def get_raw(conn: Any, table: str) -> str:
    """Return SHOW CREATE TABLE output starting at the opening parenthesis."""
    with closing(conn.cursor()) as cur:
        cur.execute("SHOW CREATE TABLE " + table)
        row = cur.fetchone()
    if row is None:
        raise NoTableError(f"Table {table} does not exist")
    create = row[1]
    i = create.find("(")
    if i == -1:
        raise ValueError("Broken schema: " + create)
    return create[i:]


def get_columns(
    conn: Any, db_name: str, table_name: str, from_table: str, cond: str = ""
) -> TableSchema:
    """Read the column layout of a table from an information_schema-like table."""
    query = (
        "SELECT COLUMN_NAME, ORDINAL_POSITION, IS_NULLABLE, DATA_TYPE, "
        "CHARACTER_MAXIMUM_LENGTH, NUMERIC_PRECISION, NUMERIC_SCALE, COLUMN_TYPE, "
        "COLUMN_KEY FROM " + from_table + " WHERE TABLE_SCHEMA = %s AND TABLE_NAME = %s "
        + cond
        + " ORDER BY ORDINAL_POSITION"
    )
    log.debug("%s %s %s", query, db_name, table_name)
    with closing(conn.cursor()) as cur:
        cur.execute(query, (db_name, table_name))
        rows = cur.fetchall()

    columns = [
        ColumnSchema(
            name=name,
            ordinal_position=pos,
            is_nullable=nullable,
            data_type=data_type,
            character_maximum_length=max_len,
            numeric_precision=precision,
            numeric_scale=scale,
            type=column_type,
            key=key,
        )
        for name, pos, nullable, data_type, max_len, precision, scale, column_type, key in rows
    ]
    if not columns:
        raise NoTableError(
            f"Table {db_name}.{table_name} for which schema was requested for, does not exist!"
        )
    schema = TableSchema(db_name=db_name, table_name=table_name, columns=columns)
    log.debug("Got schema from %r for %s.%s = %r", from_table, db_name, table_name, schema)
    return schema


def get(conn: Any, db_name: str, table_name: str) -> TableSchema:
    """Load the structured schema of ``db_name.table_name``."""
    return get_columns(conn, db_name, table_name, "information_schema.columns", "")