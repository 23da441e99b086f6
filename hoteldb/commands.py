"""Operations on the hotel (master) and room (slave) tables.

Each command takes its arguments as a list of strings and returns the
text to show the user.
"""

from __future__ import annotations

import dataclasses
import re
from typing import Sequence

from hoteldb.records import Hotel, Room, format_hotel_table, format_room_table
from hoteldb.table import Table

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int(text: str) -> int:
    """Parse the leading integer of `text`, as a 32-bit signed value."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError("stoi")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError("stoi")
    return value


def insert_master(hotels: Table[Hotel], args: Sequence[str]) -> str:
    """Insert a hotel: <id> <name> <location>."""
    if len(args) < 3:
        return "Usage: insert-m <id> <name> <location>\n"
    hotel_id = _to_int(args[0])
    if hotel_id in hotels:
        raise ValueError("Hotel with this ID already exists.")
    hotels.insert(Hotel(hotel_id, args[1], args[2]))
    return "Hotel inserted successfully.\n"


def insert_slave(hotels: Table[Hotel], rooms: Table[Room], args: Sequence[str]) -> str:
    """Insert a room at the head of its hotel's chain: <roomId> <hotelId> <number> <price>."""
    if len(args) < 4:
        return "Usage: insert-s <roomId> <hotelId> <number> <price>\n"
    room_id = _to_int(args[0])
    if room_id in rooms:
        raise ValueError("Room with this ID already exists.")
    hotel_id = _to_int(args[1])
    price = _to_int(args[3])
    hotel = hotels.get(hotel_id)
    room = Room(room_id, hotel_id, args[2], price, next_room_id=hotel.first_room_id)
    if hotel.first_room_id != -1:
        first = rooms.get(hotel.first_room_id)
        first.prev_room_id = room_id
        rooms.update(first.id, first)
    hotel.first_room_id = room_id
    hotels.update(hotel_id, hotel)
    rooms.insert(room)
    return "Room inserted successfully.\n"


def get_master(hotels: Table[Hotel], args: Sequence[str]) -> str:
    """Show one hotel by id, or every hotel when no id is given."""
    if not args:
        records = hotels.all()
        return format_hotel_table(records) if records else "No records\n"
    return hotels.get(_to_int(args[0])).describe() + "\n"


def get_slave(rooms: Table[Room], args: Sequence[str]) -> str:
    """Show one room by id, or every room when no id is given."""
    if not args:
        records = rooms.all()
        return format_room_table(records) if records else "No records\n"
    return rooms.get(_to_int(args[0])).describe() + "\n"


def delete_master(hotels: Table[Hotel], rooms: Table[Room], args: Sequence[str]) -> str:
    """Delete a hotel together with all of its rooms."""
    if not args:
        return "Usage: del-m <id>\n"
    hotel_id = _to_int(args[0])
    hotel = hotels.get(hotel_id)
    room_id = hotel.first_room_id
    while room_id != -1:
        next_id = rooms.get(room_id).next_room_id
        rooms.remove(room_id)
        room_id = next_id
    hotels.remove(hotel_id)
    return f"Hotel {hotel_id} and their rooms deleted successfully.\n"


def delete_slave(hotels: Table[Hotel], rooms: Table[Room], args: Sequence[str]) -> str:
    """Delete a room and unlink it from its neighbours."""
    if not args:
        return "Usage: del-s <id>\n"
    room_id = _to_int(args[0])
    room = rooms.get(room_id)
    if room.prev_room_id != -1:
        prev = rooms.get(room.prev_room_id)
        prev.next_room_id = room.next_room_id
        rooms.update(prev.id, prev)
    else:
        hotel = hotels.get(room.hotel_id)
        hotel.first_room_id = room.next_room_id
        hotels.update(hotel.id, hotel)
    if room.next_room_id != -1:
        nxt = rooms.get(room.next_room_id)
        nxt.prev_room_id = room.prev_room_id
        rooms.update(nxt.id, nxt)
    rooms.remove(room_id)
    return f"Room {room_id} deleted successfully and links updated.\n"


def update_master(hotels: Table[Hotel], args: Sequence[str]) -> str:
    """Change a hotel's name and location."""
    if len(args) < 3:
        return "Usage: update-m <id> <name> <location>\n"
    hotel_id = _to_int(args[0])
    hotel = dataclasses.replace(hotels.get(hotel_id), name=args[1], location=args[2])
    hotels.update(hotel_id, hotel)
    return f"Hotel {hotel_id} updated successfully.\n"


def update_slave(rooms: Table[Room], args: Sequence[str]) -> str:
    """Change a room's number and price."""
    if len(args) < 3:
        return "Usage: update-s <id> <number> <price>\n"
    room_id = _to_int(args[0])
    room = rooms.get(room_id)
    room = dataclasses.replace(room, number=args[1], price=_to_int(args[2]))
    rooms.update(room_id, room)
    return f"Room {room_id} updated.\n"


def calculate_master(hotels: Table[Hotel], args: Sequence[str]) -> str:
    """Count the live hotels."""
    return f"Total hotels: {len(hotels.all())}\n"


def calculate_slave(rooms: Table[Room], args: Sequence[str]) -> str:
    """Count the live rooms."""
    return f"Total rooms: {len(rooms.all())}\n"


def utility_master(hotels: Table[Hotel], args: Sequence[str]) -> str:
    """Show every stored hotel slot, deleted ones included, with metadata."""
    return format_hotel_table(hotels.all_records(), True)


def utility_slave(rooms: Table[Room], args: Sequence[str]) -> str:
    """Show every stored room slot, deleted ones included, with metadata."""
    return format_room_table(rooms.all_records(), True)