"""Caches, stream helpers, option parsers and in-memory statistics tables."""

__version__ = "0.1.0"

__all__ = [
    "blockcache",
    "lrucache",
    "myio",
    "testopt",
    "testoptlong",
    "pgstat",
    "pgstatcache",
    "dummytable",
    "ipsys",
]