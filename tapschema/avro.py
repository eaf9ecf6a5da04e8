"""Conversion of MySQL table schemas to Avro record schemas."""

from __future__ import annotations

from typing import Any

from .models import AvroField, AvroSchema, TableSchema
from .table_schema import get

HEATPIPE_NAMESPACE = "storagetapper"

MYSQL_TO_AVRO_TYPE = {
    "INT": "int",
    "INTEGER": "int",
    "TINYINT": "int",
    "SMALLINT": "int",
    "MEDIUMINT": "int",
    "BOOLEAN": "int",
    "BIGINT": "long",
    "FLOAT": "float",
    "DOUBLE": "double",
    "DECIMAL": "double",
    "BIT": "bytes",
    "CHAR": "string",
    "VARCHAR": "string",
    "BINARY": "bytes",
    "VARBINARY": "bytes",
    "TEXT": "bytes",
    "TINYTEXT": "bytes",
    "MEDIUMTEXT": "bytes",
    "LONGTEXT": "bytes",
    "BLOB": "bytes",
    "TINYBLOB": "bytes",
    "MEDIUMBLOB": "bytes",
    "LONGBLOB": "bytes",
    "DATE": "string",
    "DATETIME": "string",
    "TIMESTAMP": "string",
    "TIME": "string",
    "YEAR": "int",
}


def convert_to_avro_from_schema(schema: TableSchema) -> bytes:
    """Return the JSON Avro schema for a structured table schema."""
    fields = [
        AvroField(
            name=col.name,
            type=["null", MYSQL_TO_AVRO_TYPE.get(col.data_type.upper(), "")],
        )
        for col in schema.columns
    ]
    fields += [
        AvroField(name="ref_key", type=["long"]),
        AvroField(name="row_key", type=["bytes"]),
        AvroField(name="is_deleted", type=["null", "boolean"]),
    ]
    avro = AvroSchema(
        name=f"{schema.db_name}_{schema.table_name}",
        type="record",
        namespace=HEATPIPE_NAMESPACE,
        fields=fields,
        owner=schema.db_name,
    )
    return avro.to_json()


def convert_to_avro(conn: Any, db_name: str, table_name: str) -> bytes:
    """Load the table's schema and return it as a JSON Avro schema."""
    return convert_to_avro_from_schema(get(conn, db_name, table_name))