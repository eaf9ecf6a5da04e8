"""Structured table schemas and Avro schema documents."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ColumnSchema:
    """One column as described by information_schema.columns."""

    name: str
    ordinal_position: int
    is_nullable: str
    data_type: str
    character_maximum_length: int | None = None
    numeric_precision: int | None = None
    numeric_scale: int | None = None
    type: str = ""
    key: str = ""


@dataclass
class TableSchema:
    """Columns of a table, in ordinal order."""

    db_name: str
    table_name: str
    columns: list[ColumnSchema] = field(default_factory=list)


@dataclass
class AvroField:
    """A field of an Avro record; ``type`` is a union of primitive types."""

    name: str
    type: list[str]
    default: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": list(self.type), "default": self.default}


@dataclass
class AvroSchema:
    """An Avro record schema."""

    name: str
    type: str
    namespace: str
    fields: list[AvroField] = field(default_factory=list)
    owner: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "namespace": self.namespace,
            "fields": [f.to_dict() for f in self.fields],
            "owner": self.owner,
        }

    def to_json(self) -> bytes:
        """Serialize to compact JSON bytes."""
        return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_json(cls, data: str | bytes) -> AvroSchema:
        """Parse a schema produced by :meth:`to_json`."""
        doc = json.loads(data)
        try:
            fields = [
                AvroField(name=f["name"], type=list(f["type"]), default=f.get("default"))
                for f in doc.get("fields", [])
            ]
            return cls(
                name=doc["name"],
                type=doc["type"],
                namespace=doc.get("namespace", ""),
                fields=fields,
                owner=doc.get("owner", ""),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"Malformed Avro schema: {exc}") from exc