"""Public domain model surface."""

from __future__ import annotations

from propmap.domain.model.enums import GroupKind, LinkDirection, RelationKind
from propmap.domain.model.group import (
    Group,
    group_id_from_link,
    group_report_order,
    organizational_group,
    release_line_group,
    release_line_group_id,
    release_line_groups,
)
from propmap.domain.model.item import ITEM_LABEL, RELEASE_TBD, Item, display_name

__all__ = [  # noqa: RUF022
    # items
    "Item",
    "ITEM_LABEL",
    "RELEASE_TBD",
    "display_name",
    # groups
    "Group",
    "group_id_from_link",
    "group_report_order",
    "organizational_group",
    "release_line_group",
    "release_line_group_id",
    "release_line_groups",
    # enums
    "GroupKind",
    "LinkDirection",
    "RelationKind",
]
