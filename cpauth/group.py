"""Public description of the finite field group shared by prover and verifier."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from . import constants
from .exceptions import InvalidParameters


@dataclass(frozen=True)
class GroupParameters:
    """Prime ``p``, subgroup order ``q`` and two generators of that subgroup."""

    p: int
    q: int
    alpha: int
    beta: int

    def validate(self) -> "GroupParameters":
        """Check the structural invariants and return ``self``.

        Primality of ``p`` and ``q`` is taken on trust; the remaining
        relations are cheap enough to verify at startup.
        """

        if self.p < 3 or self.q < 2:
            raise InvalidParameters("Group modulus and order must be positive primes")
        if (self.p - 1) % self.q != 0:
            raise InvalidParameters("Subgroup order must divide p - 1")
        for name, generator in (("alpha", self.alpha), ("beta", self.beta)):
            if not 1 < generator < self.p:
                raise InvalidParameters(f"Generator {name} outside of (1, p)")
            if pow(generator, self.q, self.p) != 1:
                raise InvalidParameters(f"Generator {name} does not have order q")
        if self.alpha == self.beta:
            raise InvalidParameters("Generators must be independent")
        return self

    def is_element(self, value: int) -> bool:
        return 0 < value < self.p

    def in_subgroup(self, value: int) -> bool:
        return self.is_element(value) and pow(value, self.q, self.p) == 1

    def to_dict(self) -> Dict[str, str]:
        return {
            "p": hex(self.p),
            "q": hex(self.q),
            "alpha": hex(self.alpha),
            "beta": hex(self.beta),
        }

    @staticmethod
    def from_dict(data: Dict[str, str]) -> "GroupParameters":
        try:
            params = GroupParameters(
                p=int(data["p"], 16),
                q=int(data["q"], 16),
                alpha=int(data["alpha"], 16),
                beta=int(data["beta"], 16),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidParameters(f"Malformed group parameters: {exc}") from exc
        return params.validate()


def default_parameters() -> GroupParameters:
    """Return the built-in RFC 5114 group."""

    return GroupParameters(
        p=constants.P,
        q=constants.Q,
        alpha=constants.ALPHA,
        beta=constants.BETA,
    )


def load_parameters(path: str | None = None) -> GroupParameters:
    """Load parameters from a JSON file, falling back to the built-in group."""

    if path is None:
        return default_parameters()
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return GroupParameters.from_dict(payload)


__all__ = ["GroupParameters", "default_parameters", "load_parameters"]
