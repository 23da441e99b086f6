# hoteldb

A small database of hotels and their rooms. Each table is kept in two files:
a data file (`.fl`) of fixed-length binary records and an index file (`.ind`)
that maps each record's key to its slot in the data file. A deleted record is
marked as deleted and its slot is reused by a later insert. Once three slots
have been freed, the data file is compacted: records from the end of the file
are moved into the free slots and the file is truncated.

Hotels are the master records. Rooms are the slave records, and each room
belongs to a hotel. The rooms of one hotel form a doubly linked chain; a new
room goes to the head of its hotel's chain, and deleting a hotel deletes all of
its rooms too.

## Installation

```
pip install .
```

## The shell

```
hoteldb
```

By default the shell keeps its tables in `data/hotels` and `data/rooms` under
the current directory, creating the directory if needed. Another directory can
be given with `--data-dir`:

```
hoteldb --data-dir /tmp/hotel-data
```

Type `help` to list the commands and `exit` (or end of input) to leave. An
unknown command is reported with a hint to type `help`; a failing command
prints `Error: <message>` to standard error and the shell keeps running.

| Command    | Usage                                          | What it does                                  |
|------------|------------------------------------------------|-----------------------------------------------|
| `insert-m` | `insert-m <HotelID> <Name> <Location>`         | add a hotel                                   |
| `insert-s` | `insert-s <RoomID> <HotelID> <Number> <Price>` | add a room to a hotel                         |
| `get-m`    | `get-m [<HotelID>]`                            | show one hotel, or all of them                |
| `get-s`    | `get-s [<RoomID>]`                             | show one room, or all of them                 |
| `del-m`    | `del-m <HotelID>`                              | delete a hotel and all of its rooms           |
| `del-s`    | `del-s <RoomID>`                               | delete one room and relink its neighbours     |
| `update-m` | `update-m <HotelID> <Name> <Location>`         | change a hotel's name and location            |
| `update-s` | `update-s <RoomID> <Number> <Price>`           | change a room's number and price              |
| `calc-m`   | `calc-m`                                       | count the hotels                              |
| `calc-s`   | `calc-s`                                       | count the rooms                               |
| `ut-m`     | `ut-m`                                         | dump every hotel slot, deleted ones included  |
| `ut-s`     | `ut-s`                                         | dump every room slot, deleted ones included   |

Arguments are separated by whitespace, so names and locations are single words.
A command given too few arguments prints its usage line.

A session:

```
>insert-m 1 Grand Paris
Hotel inserted successfully.
>insert-s 10 1 A101 120
Room inserted successfully.
>get-s 10
Room ID: 10, Hotel ID: 1, Number: A101, Price: 120
>calc-s
Total rooms: 1
>exit
```

Names are stored in at most 14 bytes of UTF-8, locations in 24 and room
numbers in 14. Longer values are cut short.

## Using it from Python

```python
from hoteldb.records import Hotel, Room, format_hotel_table
from hoteldb.table import Table, RecordNotFoundError

with Table("data/hotels", Hotel) as hotels:
    hotels.insert(Hotel(1, "Grand", "Paris"))
    print(hotels.get(1).describe())
    print(1 in hotels)
    print(format_hotel_table(hotels.all(), False))
```

- `hoteldb.records` holds the `Hotel` and `Room` dataclasses, with `to_bytes`,
  `from_bytes` and `describe`, and `format_hotel_table` / `format_room_table`,
  which render records as text; with `ut=True` the link and deletion columns
  are shown too.
- `hoteldb.table.Table` offers `insert`, `update`, `remove`, `get`, `all`
  (live records ordered by key), `all_records` (every slot in the data file),
  `in` for key lookups, and `close`. It works as a context manager. `get`,
  `update` and `remove` raise `RecordNotFoundError` for a key that is not in the
  index. The index is written back to disk when the table is closed.
- `hoteldb.commands` has one function per shell command (`insert_master`,
  `insert_slave`, `get_master`, `get_slave`, `delete_master`, `delete_slave`,
  `update_master`, `update_slave`, `calculate_master`, `calculate_slave`,
  `utility_master`, `utility_slave`). Each takes the tables and a list of string
  arguments and returns the text to show.
- `hoteldb.cli.Shell` dispatches one input line at a time through `execute`,
  which returns `False` on `exit`.

## Tests

```
pip install .[test]
pytest
```