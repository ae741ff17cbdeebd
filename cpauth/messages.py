"""Messages exchanged by prover and verifier during the three protocol calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .codec import bytes_to_int, encode_hex, hex_to_bytes


def _decode(data: Dict[str, str], key: str) -> int:
    return bytes_to_int(hex_to_bytes(str(data[key])))


@dataclass(frozen=True)
class RegisterRequest:
    """Public identity ``y1 = alpha^x``, ``y2 = beta^x`` sent at registration."""

    user: str
    y1: int
    y2: int

    def to_dict(self) -> Dict[str, str]:
        return {"user": self.user, "y1": encode_hex(self.y1), "y2": encode_hex(self.y2)}

    @staticmethod
    def from_dict(data: Dict[str, str]) -> "RegisterRequest":
        return RegisterRequest(user=str(data["user"]), y1=_decode(data, "y1"), y2=_decode(data, "y2"))


@dataclass(frozen=True)
class ChallengeRequest:
    """Commitment ``r1 = alpha^k``, ``r2 = beta^k`` opening an attempt."""

    user: str
    r1: int
    r2: int

    def to_dict(self) -> Dict[str, str]:
        return {"user": self.user, "r1": encode_hex(self.r1), "r2": encode_hex(self.r2)}

    @staticmethod
    def from_dict(data: Dict[str, str]) -> "ChallengeRequest":
        return ChallengeRequest(user=str(data["user"]), r1=_decode(data, "r1"), r2=_decode(data, "r2"))


@dataclass(frozen=True)
class Challenge:
    auth_id: str
    c: int

    def to_dict(self) -> Dict[str, str]:
        return {"auth_id": self.auth_id, "c": encode_hex(self.c)}

    @staticmethod
    def from_dict(data: Dict[str, str]) -> "Challenge":
        return Challenge(auth_id=str(data["auth_id"]), c=_decode(data, "c"))


@dataclass(frozen=True)
class VerificationRequest:
    """Response ``s = k - c*x mod q`` for a pending challenge."""

    auth_id: str
    s: int

    def to_dict(self) -> Dict[str, str]:
        return {"auth_id": self.auth_id, "s": encode_hex(self.s)}

    @staticmethod
    def from_dict(data: Dict[str, str]) -> "VerificationRequest":
        return VerificationRequest(auth_id=str(data["auth_id"]), s=_decode(data, "s"))


__all__ = ["Challenge", "ChallengeRequest", "RegisterRequest", "VerificationRequest"]
