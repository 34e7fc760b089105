"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class GroupKind(StrEnum):
    ORGANIZATIONAL = "organizational"
    RELEASE_LINE = "release_line"


class RelationKind(StrEnum):
    RELATED = "related"
    DEPENDS = "depends"


class LinkDirection(StrEnum):
    """Which side of an issue link the other issue sits on."""

    INWARD = "inward"
    OUTWARD = "outward"
