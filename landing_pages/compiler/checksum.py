"""String hashing shared by the form-key derivation and output checksums.

The hash reproduces the classic JavaScript ``(h << 5) - h + code`` rolling
hash over UTF-16 code units, clamped to a signed 32-bit integer, so keys
derived here match keys derived by browser-side tooling for the same input.
It is change detection only, never a security primitive.

>>> base36(rolling_hash("hello"))
'1n1e4y'
"""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_MASK = 0xFFFFFFFF


def rolling_hash(text: str) -> int:
    """Return the absolute value of the 32-bit rolling hash of ``text``."""
    raw = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for index in range(0, len(raw), 2):
        unit = int.from_bytes(raw[index : index + 2], "little")
        value = ((value << 5) - value + unit) & _MASK
    if value & 0x80000000:
        value -= 1 << 32
    return abs(value)


def base36(number: int) -> str:
    """Render a non-negative integer in lowercase base 36."""
    if number < 0:
        msg = f"base36 expects a non-negative integer, got {number}"
        raise ValueError(msg)
    if number == 0:
        return "0"
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def checksum(text: str) -> str:
    """Return the base-36 rolling hash of ``text``."""
    return base36(rolling_hash(text))


__all__ = ["base36", "checksum", "rolling_hash"]
