"""Chaum-Pedersen zero-knowledge authentication package."""

from .auth import AuthService, authenticate
from .crypto import ChaumPedersen, derive_secret, power
from .exceptions import (
    AuthError,
    InvalidParameters,
    ProverNotRegistered,
    ProverStateError,
    UnknownChallenge,
    UnknownUser,
    UserAlreadyRegistered,
    VerificationFailed,
)
from .group import GroupParameters, default_parameters, load_parameters
from .messages import Challenge, ChallengeRequest, RegisterRequest, VerificationRequest
from .prover import Prover, ProverPhase
from .store import ChallengeSession, SessionStore, UserRecord

__version__ = "0.1.0"

__all__ = [
    "AuthService",
    "authenticate",
    "ChaumPedersen",
    "derive_secret",
    "power",
    "AuthError",
    "InvalidParameters",
    "ProverNotRegistered",
    "ProverStateError",
    "UnknownChallenge",
    "UnknownUser",
    "UserAlreadyRegistered",
    "VerificationFailed",
    "GroupParameters",
    "default_parameters",
    "load_parameters",
    "Challenge",
    "ChallengeRequest",
    "RegisterRequest",
    "VerificationRequest",
    "Prover",
    "ProverPhase",
    "ChallengeSession",
    "SessionStore",
    "UserRecord",
]
