"""One JSON record file per item, named ``<number>.json``."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from .schema import ItemRecord
from .translator import item_to_record, record_to_item

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from propmap.domain.model import Item

RECORD_SUFFIX: Final[str] = ".json"

log = getLogger(__name__)


def record_path(directory: Path, number: int) -> Path:
    return directory / f"{number}{RECORD_SUFFIX}"


def write_item_records(items: Iterable[Item], directory: Path) -> int:
    directory.mkdir(parents=True, exist_ok=True)
    written = 0
    for item in items:
        record = item_to_record(item)
        record_path(directory, item.number).write_text(
            record.model_dump_json(indent=2), encoding="utf-8"
        )
        written += 1
    log.info("Wrote %s item records to %s", written, directory)
    return written


def read_item_records(directory: Path) -> list[Item]:
    """Load every record in ``directory``, sorted by item number.

    Files that cannot be read or validated are logged and skipped.
    """
    items: list[Item] = []
    for path in sorted(directory.glob(f"*{RECORD_SUFFIX}")):
        try:
            record = ItemRecord.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as exc:
            log.warning("Skipping unreadable item record %s: %s", path, exc)
            continue
        items.append(record_to_item(record))
    items.sort(key=lambda item: item.number)
    log.info("Loaded %s item records from %s", len(items), directory)
    return items
