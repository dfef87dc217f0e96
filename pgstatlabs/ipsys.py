"""Column numbers and version values of the IP system statistics table."""

from __future__ import annotations

from enum import IntEnum

TABLE_OID = (1, 3, 6, 1, 4, 1, 27645, 3, 51)
_ENTRY = 1


class Column(IntEnum):
    """Column numbers of the table."""

    IP_VERSION = 1
    IN_RECEIVES = 3
    HC_IN_RECEIVES = 4
    IN_OCTETS = 5
    HC_IN_OCTETS = 6
    IN_HDR_ERRORS = 7
    IN_NO_ROUTES = 8
    IN_ADDR_ERRORS = 9
    IN_UNKNOWN_PROTOS = 10
    IN_TRUNCATED_PKTS = 11
    IN_FORW_DATAGRAMS = 12
    HC_IN_FORW_DATAGRAMS = 13
    REASM_REQDS = 14
    REASM_OKS = 15
    REASM_FAILS = 16
    IN_DISCARDS = 17
    IN_DELIVERS = 18
    HC_IN_DELIVERS = 19
    OUT_REQUESTS = 20
    HC_OUT_REQUESTS = 21
    OUT_NO_ROUTES = 22
    OUT_FORW_DATAGRAMS = 23
    HC_OUT_FORW_DATAGRAMS = 24
    OUT_DISCARDS = 25
    OUT_FRAG_REQDS = 26
    OUT_FRAG_OKS = 27
    OUT_FRAG_FAILS = 28
    OUT_FRAG_CREATES = 29
    OUT_TRANSMITS = 30
    HC_OUT_TRANSMITS = 31
    OUT_OCTETS = 32
    HC_OUT_OCTETS = 33
    IN_MCAST_PKTS = 34
    HC_IN_MCAST_PKTS = 35
    IN_MCAST_OCTETS = 36
    HC_IN_MCAST_OCTETS = 37
    OUT_MCAST_PKTS = 38
    HC_OUT_MCAST_PKTS = 39
    OUT_MCAST_OCTETS = 40
    HC_OUT_MCAST_OCTETS = 41
    IN_BCAST_PKTS = 42
    HC_IN_BCAST_PKTS = 43
    OUT_BCAST_PKTS = 44
    HC_OUT_BCAST_PKTS = 45
    DISCONTINUITY_TIME = 46
    REFRESH_RATE = 47


class InetVersion(IntEnum):
    """Internet address versions used as the table index."""

    UNKNOWN = 0
    IPV4 = 1
    IPV6 = 2


MIN_COLUMN = Column.IN_RECEIVES
MAX_COLUMN = Column.REFRESH_RATE

_COLUMN_NUMBERS = frozenset(int(column) for column in Column)


def is_valid_column(column: int) -> bool:
    """Whether ``column`` is a defined, readable column of the table."""
    return column in _COLUMN_NUMBERS and MIN_COLUMN <= column <= MAX_COLUMN


def column_oid(column: int, ip_version: int) -> tuple[int, ...]:
    """The object identifier of one cell; raises ValueError for a bad column or version."""
    if not is_valid_column(column):
        raise ValueError(f"column {column} is not readable")
    version = InetVersion(ip_version)
    return TABLE_OID + (_ENTRY, int(column), int(version))