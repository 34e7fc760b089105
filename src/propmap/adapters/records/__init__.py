"""Durable item records (JSON, one file per item)."""

from __future__ import annotations

from .directory import read_item_records, record_path, write_item_records
from .schema import ItemRecord
from .translator import item_to_record, record_to_item

__all__ = [
    "ItemRecord",
    "item_to_record",
    "read_item_records",
    "record_path",
    "record_to_item",
    "write_item_records",
]
