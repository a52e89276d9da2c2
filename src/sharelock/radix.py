"""Positional numeral decoding for share values.

Share values arrive as text in an arbitrary base between 2 and 36, using
the usual alphabet 0-9 followed by a-z (letters in either case).
Decoding is strict: int() would also accept whitespace, underscores and
0x-style prefixes, none of which are share digits.
"""

from sharelock.errors import DecodeError

MIN_BASE = 2
MAX_BASE = 36
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGIT_VALUES = {c: i for i, c in enumerate(DIGITS)}


def _check_base(base) -> int:
    # bool is an int subclass, but decode("1", True) is never intended
    if isinstance(base, bool) or not isinstance(base, int):
        raise DecodeError(f"Base must be an integer, got {base!r}", base=base)
    if not (MIN_BASE <= base <= MAX_BASE):
        raise DecodeError(
            f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {base}", base=base)
    return base


def parse_base(text) -> int:
    """Parse the string form of a base as found in share records ("16")."""
    if isinstance(text, int) and not isinstance(text, bool):
        return _check_base(text)
    if not isinstance(text, str) or not text.isascii() or not text.isdigit():
        raise DecodeError(f"Base must be a decimal integer, got {text!r}",
                          base=text)
    return _check_base(int(text))


def digit_value(char: str, base: int) -> int:
    """Value of a single digit character, or DecodeError if invalid for base."""
    # Non-ASCII first: some code points (KELVIN SIGN) lowercase to ASCII letters.
    d = _DIGIT_VALUES.get(char.lower()) if char.isascii() else None
    if d is None or d >= base:
        raise DecodeError(f"Invalid digit {char!r} for base {base}",
                          base=base)
    return d


def decode(value: str, base: int) -> int:
    """Decode a share value written in the given base.

    Args:
        value: Digits valid for base, optionally preceded by '+' or '-'.
        base: Radix in [2, 36].

    Returns:
        The exact integer, with no limit on magnitude.

    Raises:
        DecodeError: base out of range, empty digit string, or any
            character that is not a digit of base. No partial parsing.
    """
    base = _check_base(base)
    if not isinstance(value, str):
        raise DecodeError(f"Value must be a string, got {value!r}",
                          value=value, base=base)

    digits = value[1:] if value[:1] in ("+", "-") else value
    if not digits:
        raise DecodeError(f"No digits in {value!r}", value=value, base=base)

    result = 0
    for c in digits:
        try:
            d = digit_value(c, base)
        except DecodeError:
            raise DecodeError(
                f"Invalid digit {c!r} for base {base} in {value!r}",
                value=value, base=base) from None
        # Horner accumulation; int(text, base) caps the digit count for
        # non-power-of-two bases.
        result = result * base + d

    return -result if value.startswith("-") else result


def encode(number: int, base: int) -> str:
    """Render an integer in the given base, lowercase, '-' for negatives.

    Inverse of decode() for canonical strings (no '+', no leading zeros).
    """
    base = _check_base(base)
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    n = abs(number)
    out = []
    while n:
        n, d = divmod(n, base)
        out.append(DIGITS[d])
    return sign + "".join(reversed(out))
