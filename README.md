# tapschema

Helpers for working with MySQL table schemas in a change-data-capture
pipeline:

- read a table's structured schema (columns, types, keys) from
  `information_schema.columns`;
- fetch the "raw" schema, the part of `SHOW CREATE TABLE` output that starts
  at the opening parenthesis;
- apply an `ALTER` to a scratch copy of a table to see what the table would
  look like afterwards;
- turn a table schema into an Avro record schema (JSON bytes).

Every function that talks to a database takes an open DB-API connection. The
queries use the `%s` parameter style, as MySQL drivers such as PyMySQL and
mysqlclient do. The package has no dependencies of its own.

## Install

```
pip install tapschema
```

## Data classes

`tapschema.models` holds plain dataclasses:

- `ColumnSchema` – `name`, `ordinal_position`, `is_nullable`, `data_type`,
  `character_maximum_length`, `numeric_precision`, `numeric_scale`, `type`
  (the full column type) and `key` (`"PRI"` for primary key columns).
- `TableSchema` – `db_name`, `table_name` and a list of `columns`.
- `AvroField` – `name`, `type` (a union of primitive type names) and
  `default`; `to_dict()` gives its JSON form.
- `AvroSchema` – `name`, `type`, `namespace`, `fields` and `owner`;
  `to_dict()`, `to_json()` (compact JSON bytes) and `AvroSchema.from_json(data)`,
  which raises `ValueError` on a document missing required keys.

## Reading a schema

```python
from tapschema.table_schema import get, get_columns, get_raw, has_primary_key, NoTableError

schema = get(conn, "orders_db", "orders")
for column in schema.columns:
    print(column.name, column.data_type, column.key)

print(has_primary_key(schema))

raw = get_raw(conn, "orders_db.orders")  # "(\n  `id` bigint ... ) ENGINE=InnoDB ..."
```

`get` reads `information_schema.columns` ordered by ordinal position;
`get_columns(conn, db_name, table_name, from_table, cond)` does the same
against any table with those columns, with `cond` appended to the `WHERE`
clause. Both raise `NoTableError` (a `LookupError`) when no columns are found.
`get_raw` raises `NoTableError` when no row comes back and `ValueError` when
the statement has no opening parenthesis.

## Converting to Avro

```python
from tapschema.avro import convert_to_avro, convert_to_avro_from_schema
from tapschema.models import AvroSchema

avro_json = convert_to_avro(conn, "orders_db", "orders")
record = AvroSchema.from_json(avro_json)
print(record.name)  # "orders_db_orders"
```

The record is named `<db>_<table>`, has namespace `storagetapper` and its
owner is the database name. Each column becomes a field of type
`["null", <avro type>]`, looked up from `MYSQL_TO_AVRO_TYPE` by the upper-cased
data type (integers map to `int`, `BIGINT` to `long`, `DECIMAL` to `double`,
text and blob types to `bytes`, date and time types to `string`; an unknown
type gives an empty name). Three fields follow: `ref_key` (`["long"]`),
`row_key` (`["bytes"]`) and `is_deleted` (`["null", "boolean"]`).

## Trying an ALTER TABLE

```python
from tapschema.alter import get_avro_schema_from_alter_table, mutate_table

avro_json = get_avro_schema_from_alter_table(
    conn, "orders_db", "orders",
    "ALTER TABLE orders_db.orders ADD discount BIGINT",
)
```

`get_avro_schema_from_alter_table` creates a temporary table `LIKE` the
original, runs the statement on it (the first occurrence of `db.table` in the
statement is redirected to the copy), then returns the Avro schema read from
`information_schema` for the named table and drops the copy. Errors from the
database are logged and re-raised.

```python
schema, new_raw = mutate_table(
    conn, "svc", "orders_db", "orders",
    "ADD discount BIGINT", raw_schema, "state_db",
)
```

`mutate_table` creates a uniquely named scratch table in `state_db` from
`raw_schema`, applies the `ALTER` clause to it, reads back its raw and
structured schema, drops it, and returns a `TableSchema` named after
`db_name.table_name` together with the new raw schema. The original table is
not touched.

## What it does not do

The package does not open or manage database connections, does not store
schemas anywhere, and has no command-line tool; it only runs the queries
described above on the connection it is given.