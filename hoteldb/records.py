"""Fixed-size hotel and room records and their tabular rendering."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, Iterable

NAME_SIZE = 15
LOCATION_SIZE = 25
NUMBER_SIZE = 15


def _clip(text: str, size: int) -> str:
    """Cut text so that it fits a NUL-terminated field of `size` bytes."""
    return text.encode("utf-8")[: size - 1].decode("utf-8", errors="ignore")


def _pack_text(text: str, size: int) -> bytes:
    return _clip(text, size).encode("utf-8")


def _unpack_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Hotel:
    """A master record: one hotel and the head of its room chain."""

    id: int
    name: str
    location: str
    first_room_id: int = -1
    is_deleted: bool = False

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct(f"<i{NAME_SIZE}s{LOCATION_SIZE}si?3x")
    SIZE: ClassVar[int] = _LAYOUT.size

    def __post_init__(self) -> None:
        self.name = _clip(self.name, NAME_SIZE)
        self.location = _clip(self.location, LOCATION_SIZE)

    def to_bytes(self) -> bytes:
        """Serialise the record into its fixed-size binary form."""
        return self._LAYOUT.pack(
            self.id,
            _pack_text(self.name, NAME_SIZE),
            _pack_text(self.location, LOCATION_SIZE),
            self.first_room_id,
            self.is_deleted,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Hotel:
        """Build a record from its fixed-size binary form."""
        ident, name, location, first_room, deleted = cls._LAYOUT.unpack(data)
        return cls(ident, _unpack_text(name), _unpack_text(location), first_room, deleted)

    def describe(self) -> str:
        """One-line human-readable description."""
        return f"Hotel ID: {self.id}, Name: {self.name}, Location: {self.location}"


@dataclass
class Room:
    """A slave record: one room, linked to its neighbours within a hotel."""

    id: int
    hotel_id: int
    number: str
    price: int
    next_room_id: int = -1
    prev_room_id: int = -1
    is_deleted: bool = False

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct(f"<ii{NUMBER_SIZE}sxiii?3x")
    SIZE: ClassVar[int] = _LAYOUT.size

    def __post_init__(self) -> None:
        self.number = _clip(self.number, NUMBER_SIZE)

    def to_bytes(self) -> bytes:
        """Serialise the record into its fixed-size binary form."""
        return self._LAYOUT.pack(
            self.id,
            self.hotel_id,
            _pack_text(self.number, NUMBER_SIZE),
            self.price,
            self.next_room_id,
            self.prev_room_id,
            self.is_deleted,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Room:
        """Build a record from its fixed-size binary form."""
        ident, hotel_id, number, price, nxt, prev, deleted = cls._LAYOUT.unpack(data)
        return cls(ident, hotel_id, _unpack_text(number), price, nxt, prev, deleted)

    def describe(self) -> str:
        """One-line human-readable description."""
        return (
            f"Room ID: {self.id}, Hotel ID: {self.hotel_id}, "
            f"Number: {self.number}, Price: {self.price}"
        )


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_hotel_table(hotels: Iterable[Hotel], ut: bool = False) -> str:
    """Render hotels as a table; `ut` adds link and deletion columns."""
    if ut:
        lines = [
            f"{'ID':<6}{'Name':<16}{'Location':<26}{'FirstRoomID':<14}Deleted",
            "-" * 80,
        ]
        lines.extend(
            f"{h.id:<6}{h.name:<16}{h.location:<26}{h.first_room_id:<14}{_yes_no(h.is_deleted)}"
            for h in hotels
        )
    else:
        lines = [f"{'ID':<6}{'Name':<16}{'Location':<26}", "-" * 48]
        lines.extend(f"{h.id:<6}{h.name:<16}{h.location:<26}" for h in hotels)
    return "".join(line + "\n" for line in lines)


def format_room_table(rooms: Iterable[Room], ut: bool = False) -> str:
    """Render rooms as a table; `ut` adds link and deletion columns."""
    if ut:
        lines = [
            f"{'ID':<6}{'HotelID':<10}{'Number':<16}{'Price':<8}"
            f"{'NextRoomID':<12}{'PrevRoomID':<12}Deleted",
            "-" * 74,
        ]
        lines.extend(
            f"{r.id:<6}{r.hotel_id:<10}{r.number:<16}{r.price:<8}"
            f"{r.next_room_id:<12}{r.prev_room_id:<12}{_yes_no(r.is_deleted)}"
            for r in rooms
        )
    else:
        lines = [f"{'ID':<6}{'HotelID':<10}{'Number':<16}{'Price':<8}", "-" * 40]
        lines.extend(f"{r.id:<6}{r.hotel_id:<10}{r.number:<16}{r.price:<8}" for r in rooms)
    return "".join(line + "\n" for line in lines)