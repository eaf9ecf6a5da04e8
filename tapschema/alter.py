"""Computing schemas that result from ALTER TABLE statements."""

from __future__ import annotations

import logging
import random
import uuid
from contextlib import closing
from typing import Any

from .avro import convert_to_avro
from .models import TableSchema
from .table_schema import get_columns, get_raw

log = logging.getLogger(__name__)


def _execute(conn: Any, sql: str) -> None:
    with closing(conn.cursor()) as cur:
        cur.execute(sql)


def get_avro_schema_from_alter_table(
    conn: Any, db_name: str, table_name: str, alter_stmt: str
) -> bytes:
    """Apply ``alter_stmt`` to a temporary copy of the table and return the Avro schema.

    The statement must name the table as ``db.table``; that name is redirected
    to the temporary copy.
    """
    current = f"{db_name}.{table_name}"
    temp = f"{db_name}.tmptbl_{random.randrange(100000)}"

    try:
        _execute(conn, f"CREATE TEMPORARY TABLE {temp} LIKE {current}")
    except Exception:
        log.error("Error creating temp table for handling schema change using ALTER TABLE")
        raise

    try:
        _execute(conn, alter_stmt.replace(current, temp, 1))
    except Exception:
        log.error("Error executing ALTER TABLE on clone temp table")
        raise

    avro_schema = convert_to_avro(conn, db_name, table_name)
    _execute(conn, f"DROP TEMPORARY TABLE {temp}")
    return avro_schema


def mutate_table(
    conn: Any,
    svc: str,
    db_name: str,
    table_name: str,
    alter: str,
    raw_schema: str,
    state_db: str,
) -> tuple[TableSchema, str]:
    """Apply ``alter`` to a scratch copy built from ``raw_schema``.

    Returns the structured schema and the new raw schema.
    """
    tmp_name = str(uuid.uuid4())
    full_name = f"`{state_db}`.`{tmp_name}`"
    comment = f"{svc}_{db_name}_{table_name}"

    _execute(conn, f"CREATE TABLE {full_name}{raw_schema} COMMENT='{comment}'")
    _execute(conn, f"ALTER TABLE {full_name} {alter}")
    new_raw = get_raw(conn, full_name)
    scratch = get_columns(conn, state_db, tmp_name, "information_schema.columns", "")
    _execute(conn, f"DROP TABLE {full_name}")

    return TableSchema(db_name=db_name, table_name=table_name, columns=scratch.columns), new_raw