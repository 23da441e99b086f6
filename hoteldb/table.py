"""A file-backed table of fixed-size records with a sorted key index."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Generic, Protocol, TypeVar

GARBAGE_LIMIT = 3
DATA_EXTENSION = ".fl"
INDEX_EXTENSION = ".ind"


class RecordNotFoundError(LookupError):
    """Raised when a key is not present in a table."""


class _Record(Protocol):
    SIZE: int
    id: int
    is_deleted: bool

    def to_bytes(self) -> bytes: ...


R = TypeVar("R", bound=_Record)


class Table(Generic[R]):
    """Records stored in a data file, located through an index file.

    Deleted slots are remembered and reused; once enough accumulate the
    data file is compacted.
    """

    def __init__(self, base_path, record_type: type[R]) -> None:
        base = str(base_path)
        self.data_path = Path(base + DATA_EXTENSION)
        self.index_path = Path(base + INDEX_EXTENSION)
        self._record_type = record_type
        self._size = record_type.SIZE
        self._index: dict[int, int] = {}
        self._garbage: list[int] = []

        existed = self.data_path.exists()
        if not existed:
            self.data_path.touch()
        self._file = open(self.data_path, "r+b")
        if existed:
            self._load_index()

    def _load_index(self) -> None:
        self._index.clear()
        self._garbage.clear()
        try:
            handle = open(self.index_path, encoding="utf-8")
        except FileNotFoundError:
            return
        with handle:
            self._garbage = [int(token) for token in handle.readline().split()]
            tokens = iter(handle.read().split())
            for key, pos in zip(tokens, tokens):
                self._index[int(key)] = int(pos)

    def _save_index(self) -> None:
        lines = [" ".join(str(pos) for pos in self._garbage)]
        lines.extend(f"{key} {pos}" for key, pos in sorted(self._index.items()))
        self.index_path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")

    def _position(self, key: int) -> int:
        try:
            return self._index[key]
        except KeyError:
            raise RecordNotFoundError("record not found") from None

    def _read(self, position: int) -> R:
        self._file.seek(position * self._size)
        data = self._file.read(self._size)
        return self._record_type.from_bytes(data.ljust(self._size, b"\0"))

    def _write(self, position: int, record: R) -> None:
        self._file.seek(position * self._size)
        self._file.write(record.to_bytes())
        self._file.flush()

    def insert(self, record: R) -> None:
        """Store a record, reusing a freed slot when one is available."""
        if self._garbage:
            position = self._garbage.pop()
        else:
            self._file.seek(0, 2)
            position = self._file.tell() // self._size
        self._write(position, record)
        self._index[record.id] = position

    def update(self, key: int, record: R) -> None:
        """Overwrite the record stored under `key`."""
        self._write(self._position(key), record)

    def remove(self, key: int) -> None:
        """Mark the record deleted, free its slot and compact when due."""
        position = self._position(key)
        record = dataclasses.replace(self._read(position), is_deleted=True)
        self._write(position, record)
        del self._index[key]
        self._garbage.append(position)
        if len(self._garbage) >= GARBAGE_LIMIT:
            self._compact()

    def _compact(self) -> None:
        free_slots = sorted(self._garbage)
        used = sorted(self._index.items(), key=lambda item: item[1], reverse=True)
        for free, (key, position) in zip(free_slots, used):
            if position <= free:
                break
            self._write(free, self._read(position))
            self._index[key] = free
        new_size = (max(self._index.values()) + 1) * self._size if self._index else 0
        self._file.truncate(new_size)
        self._file.flush()
        self._garbage.clear()

    def get(self, key: int) -> R:
        """Return the record stored under `key`."""
        return self._read(self._position(key))

    def all(self) -> list[R]:
        """Return every live record, ordered by key."""
        return [self._read(pos) for _, pos in sorted(self._index.items())]

    def all_records(self) -> list[R]:
        """Return every record in the data file, deleted ones included."""
        self._file.seek(0)
        records = []
        while len(chunk := self._file.read(self._size)) == self._size:
            records.append(self._record_type.from_bytes(chunk))
        return records

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def close(self) -> None:
        """Write the index and release the data file."""
        if self._file.closed:
            return
        self._save_index()
        self._file.close()

    def __enter__(self) -> Table[R]:
        return self

    def __exit__(self, *args) -> None:
        self.close()