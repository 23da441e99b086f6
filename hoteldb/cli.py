"""Interactive command shell over the hotel and room tables."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from hoteldb import commands
from hoteldb.records import Hotel, Room
from hoteldb.table import Table

HELP_MESSAGE = """Available commands:
    insert-m - Insert a master record (hotel). Usage: insert-m <HotelID> <Name> <Location>
    insert-s - Insert a slave record (room). Usage: insert-s <RoomID> <HotelID> <Number> <Price>
    get-m    - Retrieve a master record by HotelID. Usage: get-m <HotelID>
    get-s    - Retrieve a slave record by RoomID. Usage: get-s <RoomID>
    del-m    - Delete a master record (hotel) and its associated slave records (rooms). Usage: del-m <HotelID>
    del-s    - Delete a slave record (room). Usage: del-s <RoomID>
    update-m - Update a master record's (hotel) field. Usage: update-m <HotelID> <Name> <Location>
    update-s - Update a slave record's (room) field. Usage: update-s <RoomID> <Number> <Price>
    calc-m   - Calculate total number of master records (hotels).
    calc-s   - Calculate total number of slave records (rooms).
    ut-m     - Display all master records (hotels) including metadata.
    ut-s     - Display all slave records (rooms) including metadata."""


class Shell:
    """Parses command lines and dispatches them to the table commands."""

    def __init__(self, hotels: Table[Hotel], rooms: Table[Room]) -> None:
        self.hotels = hotels
        self.rooms = rooms
        self._commands: dict[str, Callable[[list[str]], str]] = {
            "insert-m": lambda args: commands.insert_master(hotels, args),
            "insert-s": lambda args: commands.insert_slave(hotels, rooms, args),
            "get-m": lambda args: commands.get_master(hotels, args),
            "get-s": lambda args: commands.get_slave(rooms, args),
            "del-m": lambda args: commands.delete_master(hotels, rooms, args),
            "del-s": lambda args: commands.delete_slave(hotels, rooms, args),
            "update-m": lambda args: commands.update_master(hotels, args),
            "update-s": lambda args: commands.update_slave(rooms, args),
            "calc-m": lambda args: commands.calculate_master(hotels, args),
            "calc-s": lambda args: commands.calculate_slave(rooms, args),
            "ut-m": lambda args: commands.utility_master(hotels, args),
            "ut-s": lambda args: commands.utility_slave(rooms, args),
        }

    def execute(self, line: str) -> bool:
        """Run one input line; return False when the shell should stop."""
        if line == "exit":
            return False
        if not line:
            return True
        if line == "help":
            sys.stdout.write(HELP_MESSAGE + "\n")
            return True

        tokens = line.split()
        name, args = (tokens[0], tokens[1:]) if tokens else ("", [])
        command = self._commands.get(name)
        if command is None:
            sys.stdout.write(f"Unknown command: {name} Type 'help' for available commands.\n")
            return True
        try:
            sys.stdout.write(command(args))
        except Exception as exc:  # every failure is reported, the shell keeps running
            sys.stderr.write(f"Error: {exc}\n")
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell on the tables in the data directory."""
    parser = argparse.ArgumentParser(description="Hotel and room record store.")
    parser.add_argument("--data-dir", default="data", help="directory holding the table files")
    options = parser.parse_args(argv)

    data_dir = Path(options.data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    with Table(data_dir / "hotels", Hotel) as hotels, Table(data_dir / "rooms", Room) as rooms:
        shell = Shell(hotels, rooms)
        while True:
            sys.stdout.write(">")
            sys.stdout.flush()
            line = sys.stdin.readline()
            if not line:
                break
            if not shell.execute(line.rstrip("\n")):
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())