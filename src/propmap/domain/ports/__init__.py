"""Ports implemented by ingestion collaborators."""

from __future__ import annotations

from .sources import GroupSource, ItemSource

__all__ = ["GroupSource", "ItemSource"]
