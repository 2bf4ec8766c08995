from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

Targets = Tuple[int, ...]


class MappingTable:
    """Read-only ``source codepoint -> target codepoints`` table.

    Entries are validated by the loader before the table exists; the table
    itself only guarantees that nothing can change after construction.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[int, Targets]) -> None:
        frozen: Dict[int, Targets] = {int(k): tuple(v) for k, v in entries.items()}
        self._entries: Mapping[int, Targets] = MappingProxyType(frozen)

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_entries"):
            raise AttributeError("MappingTable is immutable")
        object.__setattr__(self, name, value)

    def get(self, cp: int) -> Optional[Targets]:
        return self._entries.get(cp)

    def __contains__(self, cp: object) -> bool:
        return cp in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def items(self) -> Iterator[Tuple[int, Targets]]:
        return iter(self._entries.items())


__all__ = ["MappingTable", "Targets"]
