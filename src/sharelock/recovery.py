"""Secret reconstruction with a leave-one-out consistency sweep.

The reference secret is f(0) over the first k points by ascending x.
Each point is then dropped in turn and f(0) recomputed from the first k
of the remaining points; a point whose removal changes the value is
reported as inconsistent.

The sweep is a heuristic, not an exhaustive check:

- Only the first k+1 points by x ever take part in a trial, so corruption
  further down the ordering is never seen.
- If a reference point is corrupted, the reference secret itself is wrong
  and every reference point whose removal still leaves a corrupted subset
  is flagged, honest ones included.
- Several corrupted shares can cancel out and go unflagged.
"""

import logging
from dataclasses import dataclass

from sharelock.errors import InsufficientSharesError
from sharelock.lagrange import check_distinct, interpolate_at_zero, lagrange_sum
from sharelock.shares import Point, Share, decode_shares, parse_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Recovery:
    """Outcome of one reconstruction run."""
    secret: int
    inconsistent: tuple
    points: tuple

    @property
    def ok(self) -> bool:
        return not self.inconsistent


def _canonical(points) -> tuple:
    """Points as a tuple sorted by ascending x, duplicates rejected."""
    pts = tuple(sorted((Point(*p) for p in points), key=lambda p: p.x))
    check_distinct(p.x for p in pts)
    return pts


def reconstruct(points, k: int) -> int:
    """Reconstruct the secret from the first k points by ascending x.

    Args:
        points: Iterable of (x, y) pairs, any order, distinct x.
        k: Threshold.

    Returns:
        f(0) of the degree-(k-1) polynomial through the reference subset.
    """
    if k < 1:
        raise ValueError(f"Threshold k must be >= 1, got {k}")
    pts = _canonical(points)
    if len(pts) < k:
        raise InsufficientSharesError(len(pts), k)
    return interpolate_at_zero(pts[:k], k)


def _trial(pts: tuple, i: int, k: int):
    """f(0) from the first k points once pts[i] is removed, or None if too few remain."""
    rest = pts[:i] + pts[i + 1:]
    if len(rest) < k:
        return None
    return lagrange_sum(rest[:k])


def find_inconsistent(points, k: int, secret: int = None) -> tuple:
    """Leave-one-out sweep: identifiers whose removal changes the secret.

    Args:
        points: Iterable of (x, y) pairs, any order, distinct x.
        k: Threshold.
        secret: Reference secret; reconstructed from points when omitted.

    Returns:
        Tuple of x-coordinates in ascending order. Points that cannot be
        tested (fewer than k would remain) are skipped.
    """
    if k < 1:
        raise ValueError(f"Threshold k must be >= 1, got {k}")
    pts = _canonical(points)
    if secret is None:
        secret = reconstruct(pts, k)

    flagged = []
    for i, p in enumerate(pts):
        trial = _trial(pts, i, k)
        if trial is None:
            logger.debug("Share %d skipped: fewer than %d shares remain", p.x, k)
            continue
        if trial.denominator != 1:
            logger.warning("Without share %d the secret is not an integer (%s)",
                           p.x, trial)
        if trial != secret:
            logger.debug("Without share %d the secret becomes %s", p.x, trial)
            flagged.append(p.x)
    return tuple(flagged)


def recover(shares, k: int) -> Recovery:
    """Decode shares, reconstruct the secret and run the consistency sweep.

    Args:
        shares: Share objects, or already decoded (x, y) pairs.
        k: Threshold.
    """
    shares = list(shares)
    decoded = sum(not isinstance(s, Share) for s in shares)
    if decoded == 0:
        pts = decode_shares(shares)
    elif decoded == len(shares):
        pts = _canonical(shares)
    else:
        raise ValueError(
            "Shares must be all Share objects or all (x, y) points, not a mix")

    secret = reconstruct(pts, k)
    logger.debug("Reference subset: %s", [p.x for p in pts[:k]])
    inconsistent = find_inconsistent(pts, k, secret)
    logger.info("Reconstructed secret from %d shares (k=%d), %d inconsistent",
                len(pts), k, len(inconsistent))
    return Recovery(secret, inconsistent, pts)


def recover_record(record: dict) -> Recovery:
    """Run recover() over an input record (see sharelock.shares)."""
    threshold, shares = parse_record(record)
    return recover(shares, threshold.k)
