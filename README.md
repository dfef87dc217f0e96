# pgstatlabs

Small, self-contained building blocks around monitoring statistics. No
third-party libraries are needed.

## Modules

- `pgstatlabs.blockcache` – `BlockCache`, a fixed-capacity cache (ten
  entries by default) that stores private copies of byte blocks as
  `CacheEntry` objects. Adding to a full cache raises `CacheFullError`.
  `report()` returns one line per entry with its position, size and an
  address-like identifier; `rnd(limit, rng)` gives a random integer in
  `[0, limit)`.
- `pgstatlabs.lrucache` – `LRUCache`, a string-to-string cache. `find()`
  returns the value (or `None`) and marks the key most recently used;
  `add()` inserts or replaces a key, and if the cache has then reached
  `max_size` entries the least recently used one is dropped, so at most
  `max_size - 1` entries remain after an insertion. `keys()` lists keys
  from least to most recently used.
- `pgstatlabs.myio` – `sopen(path, mode)` opens a file (raising `OSError`
  on failure), `s2s(source, stream)` copies the rest of one stream into
  another and returns the amount copied, and `stream_info(stream)`
  describes an open file by its descriptor and mode.
- `pgstatlabs.testopt` – `parse_args(argv)` parses `-a`, `-b` and
  `-c VALUE` (clustered forms such as `-abcVALUE` too, and `--` to end
  options) into a `ShortOptions` result; unknown options or a missing
  value for `-c` raise `OptionError`.
- `pgstatlabs.testoptlong` – `parse_args(argv)` parses `-a`, `-b`,
  `-c ARG`, `-d ARG`, `-f ARG` and the long options `--verbose`,
  `--brief`, `--add`, `--append`, `--delete ARG`, `--create ARG` and
  `--file ARG` (unambiguous prefixes and `--name=value` accepted) into a
  `LongOptions` result. Errors are collected in `LongOptions.errors`
  rather than raised. `render(options)` gives the text the command prints.
- `pgstatlabs.pgstat` – `DatabaseTable`, an in-memory table of
  per-database statistics (`DatabaseEntry`) keyed by database id.
  `get(database_id, column)` returns a pair of `AsnType` and value (names
  come back as bytes); a missing row raises `NoSuchInstance`, an unknown
  column raises `NoSuchObject`. Columns are listed in `Column`, and
  `column_type()` gives each column's `AsnType`.
- `pgstatlabs.pgstatcache` – `load_table(table, path)` adds one row per
  non-blank line of a text file: the database id, then optionally the
  name and the remaining columns in column order, separated by
  whitespace. `TableCache` keeps a `DatabaseTable` filled from such a
  file (by default `/data/for/pgstatDatabaseTable`) and reloads it once
  its timeout (60 seconds by default) has passed.
- `pgstatlabs.dummytable` – `DummyTable`, a small software-inventory
  table of `SoftwareEntry` rows read by `DummyColumn`; the id column
  always reads as the null object identifier `(0, 0)`.
- `pgstatlabs.ipsys` – column numbers of the IP system statistics table
  (`Column`) and address versions (`InetVersion`), with
  `is_valid_column(column)` and `column_oid(column, ip_version)`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from pgstatlabs.lrucache import LRUCache

cache = LRUCache(3)
cache.add("a", "1")
cache.add("b", "2")
cache.find("a")          # "1", and "a" becomes the most recent key
"b" in cache             # True
```

```python
from pgstatlabs.pgstat import AsnType, Column, DatabaseTable, NoSuchInstance

table = DatabaseTable()
entry = table.create_entry(1)
entry.commits = 42
table.get(1, Column.COMMITS)   # (AsnType.COUNTER, 42)

try:
    table.get(2, Column.ID)
except NoSuchInstance:
    pass
```

## Commands

```
pgstatlabs-blockcache
```
Fills a block cache with five random-sized blocks and prints a report of
them.

```
pgstatlabs-fmgmt hello.txt
```
Prints `hello.txt opened!`, copies the file to standard output and then
prints its descriptor and open mode. With anything other than exactly one
argument it prints a usage line and exits with status 1; when the file
cannot be opened it prints `hello.txt failed!` and exits with status 2.

```
pgstatlabs-testopt -a -b -c value rest
```
Prints `aflag = 1, bflag = 1, cvalue = value`, then a
`Non-option argument` line for each operand. Unknown options and a
missing argument to `-c` are reported on standard error with exit
status 1.

```
pgstatlabs-testoptlong --verbose --add --file data.txt extra
```
Reports each option as it is met, whether the verbose flag ended up set,
and any remaining non-option arguments. Option errors are printed on
standard error; the exit status is always 0.

## What this package does not do

The statistics tables live in memory only. The package contains no
network agent: nothing here listens for or answers management requests,
runs as a daemon, or registers the tables with another service. Nor does
it collect statistics itself; `DatabaseTable` and `DummyTable` hold only
what is put into them or, for `TableCache`, what is read from its data
file.