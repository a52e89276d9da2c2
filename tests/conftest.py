"""Shared fixtures for sharelock tests."""

import random
import pytest

# Ten shares, threshold seven, values in mixed bases.
TEN_SHARE_RECORD = {
    "keys": {"n": 10, "k": 7},
    "1": {"base": "6", "value": "13444211440455345511"},
    "2": {"base": "15", "value": "aed7015a346d635"},
    "3": {"base": "15", "value": "6aeeb69631c227c"},
    "4": {"base": "16", "value": "e1b5e05623d881f"},
    "5": {"base": "8", "value": "316034514573652620673"},
    "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
    "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
    "8": {"base": "6", "value": "20220554335330240002224253"},
    "9": {"base": "12", "value": "45153788322a1255483"},
    "10": {"base": "7", "value": "1101613130313526312514143"},
}

# Degree-6 polynomial, constant term first.
SEXTIC = [123456789012345678901234567890, 7, -3, 11, 5, 2, 1]


def poly_eval(coeffs: list, x: int) -> int:
    """Evaluate a low-degree-first polynomial at x (Horner)."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def points_on(coeffs: list, xs) -> list:
    return [(x, poly_eval(coeffs, x)) for x in xs]


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def ten_share_record():
    return {key: dict(entry) for key, entry in TEN_SHARE_RECORD.items()}


@pytest.fixture
def sextic_points():
    """Points 1..10 on SEXTIC, all consistent."""
    return points_on(SEXTIC, range(1, 11))


@pytest.fixture
def random_polynomial(rng):
    """Factory: random integer polynomial of degree k-1 with a big constant term."""
    def make(k: int) -> list:
        secret = rng.getrandbits(256) - (1 << 255)
        return [secret] + [rng.randint(-10**12, 10**12) for _ in range(k - 1)]
    return make
