"""SQLite helpers for named records."""

from .schema import DDL, create_schema
from .utils import get_connection, read_record, transaction, write_record

__all__ = [
    "DDL",
    "create_schema",
    "get_connection",
    "transaction",
    "read_record",
    "write_record",
]
