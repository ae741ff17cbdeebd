"""Big-endian integer encoding and range checked decoding for wire values."""

from __future__ import annotations

from .exceptions import InvalidParameters
from .group import GroupParameters


def int_to_bytes(value: int) -> bytes:
    """Encode a non-negative integer as minimal big-endian bytes.

    Zero encodes as a single null byte.
    """

    if value < 0:
        raise InvalidParameters("Only non-negative integers can be encoded")
    length = max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, "big")


def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, "big")


def hex_to_bytes(text: str) -> bytes:
    """Decode the hex transport form of a byte field."""

    if text.startswith(("0x", "0X")):
        text = text[2:]
    if len(text) % 2:
        text = "0" + text
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise InvalidParameters("Value must be hex encoded") from exc


def encode_hex(value: int) -> str:
    return int_to_bytes(value).hex()


def check_element(params: GroupParameters, value: int, *, name: str = "element") -> None:
    if not params.is_element(value):
        raise InvalidParameters(f"{name} must lie in [1, p)")


def check_exponent(params: GroupParameters, value: int, *, name: str = "exponent") -> None:
    if not 0 <= value < params.q:
        raise InvalidParameters(f"{name} must lie in [0, q)")


__all__ = [
    "bytes_to_int",
    "check_element",
    "check_exponent",
    "encode_hex",
    "hex_to_bytes",
    "int_to_bytes",
]
