"""Error kinds raised by the Chaum-Pedersen authentication core."""

from __future__ import annotations


class AuthError(Exception):
    """Base class for every protocol level failure."""


class InvalidParameters(AuthError, ValueError):
    """A group element, exponent or encoding is outside its allowed range."""


class UnknownUser(AuthError):
    """A challenge was requested for an identity that was never registered."""


class UserAlreadyRegistered(AuthError):
    """A second registration was attempted for the same identity."""


class UnknownChallenge(AuthError):
    """The auth id is absent, already consumed or expired."""


class VerificationFailed(AuthError):
    """The proof did not satisfy the verification equations."""


class ProverStateError(AuthError):
    """A prover operation was invoked in the wrong phase."""


class ProverNotRegistered(ProverStateError):
    """Authentication was started before the prover registered."""


__all__ = [
    "AuthError",
    "InvalidParameters",
    "UnknownUser",
    "UserAlreadyRegistered",
    "UnknownChallenge",
    "VerificationFailed",
    "ProverStateError",
    "ProverNotRegistered",
]
