"""Exact Lagrange interpolation at x=0.

Works over the rationals with fractions.Fraction rather than a finite
field: share values are plain integers, so the basis coefficients
prod_{j!=i} (-x_j)/(x_i - x_j) are generally non-integer and must be
carried exactly. Fraction keeps every intermediate in lowest terms.
"""

from fractions import Fraction

from sharelock.errors import (
    DuplicateShareError, InsufficientSharesError, NonIntegerResultError,
)


def check_distinct(xs) -> None:
    """Raise DuplicateShareError on the first repeated x-coordinate."""
    seen = set()
    for x in xs:
        if x in seen:
            raise DuplicateShareError(x)
        seen.add(x)


def basis_at_zero(xs: list, i: int) -> Fraction:
    """Lagrange basis coefficient L_i(0) = prod_{j!=i} (0 - x_j) / (x_i - x_j)."""
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        num *= -xj         # (0 - x_j)
        den *= xi - xj     # (x_i - x_j)
    return Fraction(num, den)


def lagrange_sum(points) -> Fraction:
    """Exact value at x=0 of the polynomial through points, as a Fraction.

    points = [(x_0, y_0), (x_1, y_1), ...] with distinct x. No integrality
    check: callers comparing trial reconstructions want the raw rational.
    """
    points = list(points)
    if not points:
        raise InsufficientSharesError(0, 1)
    xs = [x for x, _ in points]
    check_distinct(xs)

    total = Fraction(0)
    for i, (_, yi) in enumerate(points):
        total += yi * basis_at_zero(xs, i)
    return total


def interpolate_at_zero(points, k: int = None) -> int:
    """Value at x=0 of the unique polynomial through the given points.

    Args:
        points: Iterable of (x, y) integer pairs with distinct x.
        k: Optional threshold. When given, fewer than k points fail
            instead of yielding a lower-degree approximation.

    Returns:
        f(0) as an int. The result does not depend on point order.

    Raises:
        InsufficientSharesError: no points, or fewer than k.
        DuplicateShareError: two points with the same x.
        NonIntegerResultError: the exact sum is not an integer.
    """
    points = list(points)
    need = 1 if k is None else max(k, 1)
    if len(points) < need:
        raise InsufficientSharesError(len(points), need)

    value = lagrange_sum(points)
    if value.denominator != 1:
        raise NonIntegerResultError(value)
    return value.numerator
