"""MySQL table schema reading, ALTER trials on scratch tables and Avro conversion."""

__version__ = "0.1.0"
__all__ = ["models", "table_schema", "avro", "alter"]