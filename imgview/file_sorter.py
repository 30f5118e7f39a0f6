"""Ordering of image files by name, extension or modification date."""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import Callable, Dict, Iterable, List, Tuple


class SortType(Enum):
    NAME = "name"
    DATE = "date"
    EXTENSION = "extension"


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def _stem_and_extension(path: str) -> Tuple[str, str]:
    name = re.split(r"[\\/]", path.lower())[-1]
    if name in ("", ".", ".."):
        return name, ""
    dot = name.rfind(".")
    if dot <= 0:
        return name, ""
    return name[:dot], name[dot:]


def _name_key(path: str) -> Tuple[str, str]:
    return _stem_and_extension(path)


def _extension_key(path: str) -> Tuple[str, str]:
    stem, extension = _stem_and_extension(path)
    return extension, stem


def _date_key(path: str) -> int:
    return os.stat(path).st_mtime_ns


_KEYS: Dict[SortType, Callable[[str], object]] = {
    SortType.NAME: _name_key,
    SortType.DATE: _date_key,
    SortType.EXTENSION: _extension_key,
}


class FileSorter:
    """Compares file paths by the active sort type, each type with its own direction."""

    def __init__(self, sort_type: SortType = SortType.NAME) -> None:
        self.sort_type = sort_type
        self._directions: Dict[SortType, SortDirection] = {
            SortType.NAME: SortDirection.ASCENDING,
            SortType.DATE: SortDirection.DESCENDING,
            SortType.EXTENSION: SortDirection.ASCENDING,
        }

    @property
    def active_sort_direction(self) -> SortDirection:
        return self._directions[self.sort_type]

    def _key(self) -> Callable[[str], object]:
        try:
            return _KEYS[self.sort_type]
        except KeyError:
            raise ValueError(f"unexpected sort type {self.sort_type!r}") from None

    def less(self, a: str, b: str) -> bool:
        """True if ``a`` goes before ``b``."""
        key = self._key()
        if self.active_sort_direction is SortDirection.ASCENDING:
            return key(a) < key(b)
        return key(b) < key(a)

    def sort(self, paths: Iterable[str]) -> List[str]:
        """Return the paths in order."""
        return sorted(
            paths,
            key=self._key(),
            reverse=self.active_sort_direction is SortDirection.DESCENDING,
        )

    def set_sort_direction(self, sort_type: SortType, direction: SortDirection) -> None:
        self._directions[sort_type] = direction

    def set_active_sort_direction(self, direction: SortDirection) -> None:
        self.set_sort_direction(self.sort_type, direction)