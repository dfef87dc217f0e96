import random

import pytest

from pgstatlabs.blockcache import (
    MAX_CACHE_BUF,
    MAX_CACHE_ENTRIES,
    BlockCache,
    CacheEntry,
    CacheFullError,
    main,
    rnd,
)


def test_add_keeps_a_private_copy():
    cache = BlockCache()
    source = bytearray(b"abcdef")
    entry = cache.add(source)
    source[0] = ord("z")
    assert entry.block == b"abcdef"
    assert entry.size == len(b"abcdef")


def test_entries_are_kept_in_insertion_order():
    cache = BlockCache()
    blocks = [b"one", b"three", b""]
    for block in blocks:
        cache.add(block)
    assert len(cache) == len(blocks)
    assert [entry.block for entry in cache] == blocks


def test_default_capacity_matches_source_limit():
    cache = BlockCache()
    assert cache.capacity == MAX_CACHE_ENTRIES
    for _ in range(MAX_CACHE_ENTRIES):
        cache.add(b"x")
    with pytest.raises(CacheFullError):
        cache.add(b"x")


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BlockCache(-1)


def test_report_of_empty_cache_is_a_newline():
    assert BlockCache().report() == "\n"


def test_report_has_one_line_per_entry():
    cache = BlockCache(3)
    first = cache.add(b"12345")
    cache.add(b"ab")
    report = cache.report()
    lines = report.split("\n")
    assert report.endswith("\n")
    assert lines[0] == ""
    assert lines[1] == f" 0.  5 bytes at 0x{first.address:X}"
    assert lines[2].startswith(" 1.  2 bytes at 0x")
    assert len([line for line in lines if "bytes at 0x" in line]) == 2


def test_clear_empties_cache():
    cache = BlockCache()
    cache.add(b"data")
    cache.clear()
    assert len(cache) == 0
    assert list(cache) == []


def test_entry_size_property():
    assert CacheEntry(b"abc").size == 3


def test_rnd_stays_in_range():
    rng = random.Random(1234)
    values = [rnd(MAX_CACHE_BUF, rng) for _ in range(200)]
    assert all(0 <= value < MAX_CACHE_BUF for value in values)


def test_rnd_of_zero_is_zero():
    assert rnd(0, random.Random(7)) == 0


def test_rnd_is_reproducible_with_same_seed():
    first = [rnd(50, random.Random(99)) for _ in range(1)]
    second = [rnd(50, random.Random(99)) for _ in range(1)]
    assert first == second


def test_main_prints_five_entries(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("\n")
    assert out.endswith("\n")
    assert len([line for line in out.splitlines() if "bytes at 0x" in line]) == 5