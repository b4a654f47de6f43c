from typing import Iterable, Iterator, List, Optional


class History:
    """Ordered log of the raw text of every accepted drawing command.

    Entries go in at the end and come out only from the end (undo) or all
    at once (load).
    """

    def __init__(self, entries: Optional[Iterable[str]] = None) -> None:
        self._entries: List[str] = list(entries or ())

    def append(self, entry: str) -> None:
        self._entries.append(entry)

    def pop(self) -> str:
        return self._entries.pop()

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> tuple:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"History({self._entries!r})"
