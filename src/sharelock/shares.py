"""Share records and their decoded points.

A record is the JSON layout shares are handed over in:

    {
      "keys": {"n": 10, "k": 7},
      "1": {"base": "6", "value": "13444211440455345511"},
      "2": {"base": "15", "value": "aed7015a346d635"},
      ...
    }

Every key other than "keys" is a share identifier, which doubles as the
share's x-coordinate.
"""

import json
import logging
from dataclasses import dataclass
from typing import NamedTuple

from sharelock.errors import DecodeError, RecordError
from sharelock.lagrange import check_distinct
from sharelock.radix import decode, parse_base

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


class Point(NamedTuple):
    """A decoded share: x is the identifier, y the decoded value."""
    x: int
    y: int


@dataclass(frozen=True)
class Share:
    """One share as received: identifier, radix and encoded value."""
    x: int
    base: int
    value: str

    def decode(self) -> Point:
        try:
            return Point(self.x, decode(self.value, self.base))
        except DecodeError as e:
            raise DecodeError(f"Share {self.x}: {e}", value=self.value,
                              base=self.base) from e


@dataclass(frozen=True)
class Threshold:
    """Threshold parameters: k of n shares reconstruct the secret."""
    n: int
    k: int

    def __post_init__(self):
        if self.k < 1:
            raise ValueError(f"Threshold k must be >= 1, got {self.k}")
        if self.n < self.k:
            raise ValueError(
                f"n must be >= k, got n={self.n}, k={self.k}")


def decode_shares(shares) -> tuple:
    """Decode shares into points, sorted by x. Aborts on the first bad share."""
    points = [s.decode() for s in shares]
    points.sort(key=lambda p: p.x)
    check_distinct(p.x for p in points)
    for p in points:
        logger.debug("Decoded share %d -> %d", p.x, p.y)
    return tuple(points)


def _parse_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise RecordError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise RecordError(f"{what} must be an integer, got {value!r}")


def parse_share(key: str, entry) -> Share:
    """Build a Share from one record entry."""
    x = _parse_int(key, "Share identifier")
    if x < 1:
        raise RecordError(f"Share identifier must be positive, got {x}")
    if not isinstance(entry, dict):
        raise RecordError(f"Share {x} must be an object, got {entry!r}")
    missing = [f for f in ("base", "value") if f not in entry]
    if missing:
        raise RecordError(f"Share {x} is missing {', '.join(missing)}")
    value = entry["value"]
    if not isinstance(value, str):
        raise RecordError(f"Share {x} value must be a string, got {value!r}")
    return Share(x, parse_base(entry["base"]), value)


def parse_record(record: dict) -> tuple:
    """Split a record into its Threshold and its list of Shares.

    Share order follows the record; sorting happens on decode.
    """
    if not isinstance(record, dict):
        raise RecordError(f"Record must be an object, got {type(record).__name__}")
    keys = record.get(KEYS_FIELD)
    if not isinstance(keys, dict):
        raise RecordError(f"Record has no {KEYS_FIELD!r} object")
    for field in ("n", "k"):
        if field not in keys:
            raise RecordError(f"{KEYS_FIELD}.{field} is missing")

    n = _parse_int(keys["n"], f"{KEYS_FIELD}.n")
    k = _parse_int(keys["k"], f"{KEYS_FIELD}.k")
    threshold = Threshold(n, k)

    shares = [parse_share(key, entry)
              for key, entry in record.items() if key != KEYS_FIELD]
    if len(shares) != n:
        logger.warning("Record declares n=%d but carries %d shares",
                       n, len(shares))
    return threshold, shares


def load_record(text: str) -> dict:
    """Parse a JSON document into a record."""
    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordError(f"Invalid JSON: {e}") from e
    if not isinstance(record, dict):
        raise RecordError(f"Record must be an object, got {type(record).__name__}")
    return record
