import struct

import pytest

from hoteldb.records import Hotel, Room, format_hotel_table, format_room_table


def test_hotel_round_trip():
    hotel = Hotel(7, "Ritz", "Paris", 12, True)
    assert Hotel.from_bytes(hotel.to_bytes()) == hotel


def test_room_round_trip():
    room = Room(3, 7, "101A", 250, 4, 2, False)
    assert Room.from_bytes(room.to_bytes()) == room


def test_serialised_size_is_fixed():
    assert len(Hotel(1, "a", "b").to_bytes()) == Hotel.SIZE
    assert len(Hotel(2, "x" * 40, "y" * 40).to_bytes()) == Hotel.SIZE
    assert len(Room(1, 1, "n", 1).to_bytes()) == Room.SIZE


def test_layout_sizes_match_struct_layout():
    assert len(Hotel(1, "a", "b").to_bytes()) == 52
    assert len(Room(1, 1, "n", 1).to_bytes()) == 40


def test_defaults():
    hotel = Hotel(1, "a", "b")
    assert hotel.first_room_id == -1
    assert hotel.is_deleted is False
    room = Room(1, 2, "n", 5)
    assert (room.next_room_id, room.prev_room_id, room.is_deleted) == (-1, -1, False)


def test_long_fields_are_truncated():
    hotel = Hotel(1, "A" * 20, "B" * 30)
    assert hotel.name == "A" * 14
    assert hotel.location == "B" * 24
    room = Room(1, 1, "C" * 20, 10)
    assert room.number == "C" * 14


def test_truncation_survives_round_trip():
    hotel = Hotel(1, "N" * 50, "L" * 50)
    restored = Hotel.from_bytes(hotel.to_bytes())
    assert restored.name == "N" * 14
    assert restored.location == "L" * 24


def test_from_bytes_rejects_wrong_length():
    with pytest.raises((ValueError, struct.error)):
        Hotel.from_bytes(b"\0" * 10)


def test_hotel_describe():
    assert Hotel(5, "Ritz", "Paris").describe() == "Hotel ID: 5, Name: Ritz, Location: Paris"


def test_room_describe():
    text = Room(9, 5, "12B", 300).describe()
    assert text == "Room ID: 9, Hotel ID: 5, Number: 12B, Price: 300"


def test_hotel_table_plain():
    out = format_hotel_table([Hotel(1, "Ritz", "Paris"), Hotel(2, "Savoy", "London")])
    lines = out.splitlines()
    assert lines[0].split() == ["ID", "Name", "Location"]
    assert lines[1] == "-" * 48
    assert lines[2].split() == ["1", "Ritz", "Paris"]
    assert lines[3].split() == ["2", "Savoy", "London"]
    assert out.endswith("\n")


def test_hotel_table_ut_columns():
    out = format_hotel_table([Hotel(1, "Ritz", "Paris", 4, True)], ut=True)
    lines = out.splitlines()
    assert lines[0].split() == ["ID", "Name", "Location", "FirstRoomID", "Deleted"]
    assert lines[1] == "-" * 80
    assert lines[2].split() == ["1", "Ritz", "Paris", "4", "Yes"]
    assert lines[2].index("Ritz") == 6


def test_room_table_plain_and_ut():
    rooms = [Room(3, 1, "101", 99, -1, 2, False)]
    plain = format_room_table(rooms).splitlines()
    assert plain[1] == "-" * 40
    assert plain[2].split() == ["3", "1", "101", "99"]
    full = format_room_table(rooms, ut=True).splitlines()
    assert full[1] == "-" * 74
    assert full[2].split() == ["3", "1", "101", "99", "-1", "2", "No"]


def test_empty_table_has_only_header():
    assert len(format_room_table([]).splitlines()) == 2