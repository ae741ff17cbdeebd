"""Core arithmetic for the Chaum-Pedersen equality of discrete logarithms proof."""

from __future__ import annotations

import hashlib
import secrets
from typing import Tuple

from .exceptions import InvalidParameters
from .group import GroupParameters


def power(base: int, exponent: int, modulus: int) -> int:
    """Modular exponentiation over arbitrary precision integers."""

    if modulus <= 0:
        raise InvalidParameters("Modulus must be positive")
    if exponent < 0:
        raise InvalidParameters("Exponent must be non-negative")
    return pow(base, exponent, modulus)


class ChaumPedersen:
    """Protocol arithmetic bound to one set of group parameters."""

    def __init__(self, params: GroupParameters) -> None:
        self.params = params

    def random_exponent(self) -> int:
        """Uniform secret or nonce in ``[1, q)``."""

        return secrets.randbelow(self.params.q - 1) + 1

    def random_challenge(self) -> int:
        """Uniform challenge in ``[0, q)``."""

        return secrets.randbelow(self.params.q)

    def public_pair(self, exponent: int) -> Tuple[int, int]:
        params = self.params
        return (
            power(params.alpha, exponent, params.p),
            power(params.beta, exponent, params.p),
        )

    def commit(self, k: int) -> Tuple[int, int]:
        return self.public_pair(k)

    def respond(self, k: int, c: int, x: int) -> int:
        q = self.params.q
        # Reduce c*x first so the addition of q keeps the value non-negative.
        return (k % q + q - (c * x) % q) % q

    def verify(self, r1: int, r2: int, c: int, s: int, y1: int, y2: int) -> bool:
        """Return True only when both generator equations hold."""

        p = self.params.p
        if c < 0 or s < 0:
            return False
        first = (power(self.params.alpha, s, p) * power(y1, c, p)) % p
        second = (power(self.params.beta, s, p) * power(y2, c, p)) % p
        return first == r1 and second == r2


def derive_secret(password: bytes | str, params: GroupParameters) -> int:
    """Stretch a password into a secret exponent in ``[1, q)``."""

    if isinstance(password, str):
        password = password.encode("utf-8")
    if not password:
        raise InvalidParameters("Password must not be empty")
    # Oversample by 128 bits so the reduction bias is negligible.
    length = (params.q.bit_length() + 128 + 7) // 8
    material = hashlib.shake_256(b"cpauth-secret" + password).digest(length)
    return int.from_bytes(material, "big") % (params.q - 1) + 1


__all__ = ["ChaumPedersen", "derive_secret", "power"]
