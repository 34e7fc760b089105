"""Manually curated override rules ("must not map").

Automatic reconciliation produces some memberships that are known to be wrong.
The rules file lists, per item number, the group ids that item must never be
mapped to. The literal ``*`` forbids every group for that item.

A key listed twice keeps only its last value, as with Java properties files.
File format is a flat properties file::

    # comment
    8130200=*
    286 = jdk/11, amber
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from propmap.config.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

WILDCARD: Final[str] = "*"
_COMMENT_PREFIXES: Final[tuple[str, ...]] = ("#", "!")
_SEPARATORS: Final[tuple[str, ...]] = ("=", ":")

log = getLogger(__name__)


class OverrideRulesUnavailableError(ConfigurationError):
    """Raised when the override rules source cannot be read."""


class InvalidOverrideRuleError(ConfigurationError):
    """Raised when an override rule cannot be parsed."""


def _split_group_ids(value: str) -> frozenset[str]:
    return frozenset(token.strip().lower() for token in value.split(",") if token.strip())


def _split_entry(line: str) -> tuple[str, str]:
    positions = [line.find(sep) for sep in _SEPARATORS if sep in line]
    if not positions:
        return line.strip(), ""
    cut = min(positions)
    return line[:cut].strip(), line[cut + 1 :].strip()


def _parse_item_number(key: object, *, source: str) -> int:
    try:
        return int(str(key).strip())
    except ValueError as exc:
        raise InvalidOverrideRuleError(
            f"Override rule key {key!r} in {source} is not an item number"
        ) from exc


def _iter_entries(text: str) -> Iterator[tuple[str, str]]:
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith(_COMMENT_PREFIXES):
            continue
        yield _split_entry(line)


@dataclass(frozen=True, slots=True)
class OverrideRules:
    _rules: Mapping[int, frozenset[str]] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def load(cls, path: Path | str) -> OverrideRules:
        """Load rules from a properties file.

        A missing or unreadable file is a configuration error, never an empty
        rule set.
        """
        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as exc:
            raise OverrideRulesUnavailableError(f"Couldn't load mappings: {source}") from exc
        return cls._from_entries(_iter_entries(text), source=str(source))

    @classmethod
    def from_mapping(cls, mapping: Mapping[int | str, str | Iterable[str]]) -> OverrideRules:
        entries: list[tuple[str, str]] = []
        for key, value in mapping.items():
            joined = value if isinstance(value, str) else ",".join(value)
            entries.append((str(key), joined))
        return cls._from_entries(entries, source="mapping")

    @classmethod
    def _from_entries(cls, entries: Iterable[tuple[str, str]], *, source: str) -> OverrideRules:
        rules: dict[int, frozenset[str]] = {}
        for key, value in entries:
            number = _parse_item_number(key, source=source)
            group_ids = _split_group_ids(value)
            if not group_ids:
                rules.pop(number, None)
                continue
            rules[number] = group_ids
            log.info("Item %s must not map to %s", number, sorted(group_ids))
        return cls(MappingProxyType(rules))

    def forbids(self, number: int, group_id: str) -> bool:
        forbidden = self._rules.get(number)
        if forbidden is None:
            return False
        return group_id in forbidden or WILDCARD in forbidden

    def forbidden_for(self, number: int) -> frozenset[str]:
        return self._rules.get(number, frozenset())

    @property
    def item_numbers(self) -> tuple[int, ...]:
        return tuple(sorted(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, number: object) -> bool:
        return number in self._rules
