"""Translate between domain items and durable records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from propmap.domain.model import Item

from .schema import ItemRecord

if TYPE_CHECKING:
    from collections.abc import Mapping


def item_to_record(item: Item) -> ItemRecord:
    if item.has_pending_links:
        raise ValueError(f"item {item.number} has unresolved relationship links")
    return ItemRecord(
        name=item.name,
        number=item.number,
        status=item.status,
        created=item.created,
        updated=item.updated,
        release=item.release,
        discussion=item.discussion,
        issue=item.issue,
        body=item.body,
        related=sorted(item.related),
        depends=sorted(item.depends),
        groups=sorted(item.declared_group_ids),
    )


def record_to_item(record: ItemRecord | Mapping[str, object]) -> Item:
    if not isinstance(record, ItemRecord):
        record = ItemRecord.model_validate(record)
    item = Item(
        number=record.number,
        name=record.name,
        status=record.status,
        created=record.created,
        updated=record.updated,
        release=record.release,
        discussion=record.discussion,
        issue=record.issue,
        body=record.body,
    )
    for number in record.related:
        item.add_related(number)
    for number in record.depends:
        item.add_depends(number)
    for group_id in record.groups:
        item.declare_group(group_id)
    return item
