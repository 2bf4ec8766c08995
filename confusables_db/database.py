"""Query surface over a loaded confusables table.

A :class:`Database` is immutable once built. Every query is a pure function
of its arguments and the table, so one instance can be shared between any
number of threads without locking.
"""

from __future__ import annotations

import unicodedata
from datetime import datetime
from typing import Iterator, List, Optional

from confusables_db.codepoints import Codepoint, to_codepoint
from confusables_db.table import MappingTable

_ASCII_LIMIT = 0x80
_PRINTABLE_MIN = 0x20
_PRINTABLE_MAX = 0x7E


class Database:
    __slots__ = (
        "_table",
        "_unicode_version",
        "_source_date",
        "_generated_at",
        "_source_url",
    )

    def __init__(
        self,
        table: MappingTable,
        *,
        unicode_version: str = "",
        source_date: str = "",
        generated_at: Optional[datetime] = None,
        source_url: str = "",
    ) -> None:
        self._table = table
        self._unicode_version = unicode_version
        self._source_date = source_date
        self._generated_at = generated_at
        self._source_url = source_url

    # --- provenance -------------------------------------------------------

    @property
    def unicode_version(self) -> str:
        return self._unicode_version

    @property
    def source_date(self) -> str:
        return self._source_date

    @property
    def generated_at(self) -> Optional[datetime]:
        return self._generated_at

    @property
    def source_url(self) -> str:
        return self._source_url

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, value: object) -> bool:
        try:
            cp = to_codepoint(value)  # type: ignore[arg-type]
        except TypeError:
            return False
        return cp in self._table

    def __repr__(self) -> str:
        return "<Database unicode_version=%r mappings=%d>" % (
            self._unicode_version,
            len(self._table),
        )

    # --- lookups ----------------------------------------------------------

    def lookup(self, cp: Codepoint) -> Optional[List[int]]:
        """Return a fresh list of the target codepoints for ``cp``, or None."""
        targets = self._table.get(to_codepoint(cp))
        if targets is None:
            return None
        return list(targets)

    def lookup_ascii(self, cp: Codepoint) -> Optional[int]:
        """Return the single printable ASCII replacement for ``cp``, if any.

        ASCII input is never remapped. Multi-codepoint targets ("ß" -> "ss")
        and non-ASCII single targets are left alone; this is a display-safe
        fold, not a decomposition.
        """
        value = to_codepoint(cp)
        if value < _ASCII_LIMIT:
            return None
        targets = self._table.get(value)
        if targets is None or len(targets) != 1:
            return None
        target = targets[0]
        if _PRINTABLE_MIN <= target <= _PRINTABLE_MAX:
            return target
        return None

    # --- string transforms ------------------------------------------------

    def iter_ascii(self, s: str) -> Iterator[str]:
        """Lazily yield ``s`` one character at a time with ASCII folding applied."""
        for ch in s:
            replacement = self.lookup_ascii(ord(ch))
            yield ch if replacement is None else chr(replacement)

    def to_ascii(self, s: str) -> str:
        return "".join(self.iter_ascii(s))

    def skeleton(self, s: str) -> str:
        """TR39 skeleton: NFD, map every confusable, NFD again.

        The result is only meant for comparison and should not be displayed.
        """
        decomposed = unicodedata.normalize("NFD", s)
        out: List[str] = []
        for ch in decomposed:
            targets = self._table.get(ord(ch))
            if targets is None:
                out.append(ch)
            else:
                out.extend(chr(t) for t in targets)
        return unicodedata.normalize("NFD", "".join(out))

    def is_confusable(self, a: str, b: str) -> bool:
        return self.skeleton(a) == self.skeleton(b)


__all__ = ["Database"]
