"""Prover side state: the long-lived secret and the per-attempt nonce."""

from __future__ import annotations

import enum
import logging
from typing import Optional

from .codec import check_exponent
from .crypto import ChaumPedersen
from .exceptions import InvalidParameters, ProverNotRegistered, ProverStateError
from .group import GroupParameters
from .messages import Challenge, ChallengeRequest, RegisterRequest, VerificationRequest

logger = logging.getLogger(__name__)


class ProverPhase(enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    REGISTERED = "registered"
    CHALLENGE_ISSUED = "challenge-issued"
    COMPLETED = "completed"


class Prover:
    """Holds ``x`` and produces registration and challenge-response messages.

    A prover has at most one outstanding attempt. Starting another attempt
    drops the pending nonce, and answering a challenge always discards it,
    so a nonce is never used for two challenges.
    """

    def __init__(self, user: str, params: GroupParameters) -> None:
        if not user:
            raise InvalidParameters("User name must not be empty")
        self.user = user
        self.params = params
        self.math = ChaumPedersen(params)
        self.phase = ProverPhase.UNINITIALIZED
        self._secret: Optional[int] = None
        self._nonce: Optional[int] = None
        self.y1: Optional[int] = None
        self.y2: Optional[int] = None

    def initialize(self, secret: Optional[int] = None) -> "Prover":
        if secret is None:
            secret = self.math.random_exponent()
        elif not 0 < secret < self.params.q:
            raise InvalidParameters("Secret must lie in [1, q)")
        self._secret = secret
        self.y1, self.y2 = self.math.public_pair(secret)
        self._nonce = None
        self.phase = ProverPhase.INITIALIZED
        return self

    def restore(self, secret: int) -> "Prover":
        """Initialize from a secret whose identity the verifier already holds."""

        self.initialize(secret)
        self.phase = ProverPhase.REGISTERED
        return self

    def register(self) -> RegisterRequest:
        if self._secret is None:
            raise ProverStateError("Prover must be initialized before registering")
        self.phase = ProverPhase.REGISTERED
        return RegisterRequest(user=self.user, y1=self.y1, y2=self.y2)

    def begin_authentication(self) -> ChallengeRequest:
        if self.phase in (ProverPhase.UNINITIALIZED, ProverPhase.INITIALIZED):
            raise ProverNotRegistered(f"Prover '{self.user}' has not registered")
        if self._nonce is not None:
            logger.debug("Abandoning pending attempt for %s", self.user)
        self._nonce = self.math.random_exponent()
        r1, r2 = self.math.commit(self._nonce)
        self.phase = ProverPhase.CHALLENGE_ISSUED
        return ChallengeRequest(user=self.user, r1=r1, r2=r2)

    def answer(self, challenge: Challenge) -> VerificationRequest:
        if self.phase is not ProverPhase.CHALLENGE_ISSUED or self._nonce is None:
            raise ProverStateError("No authentication attempt is pending")
        nonce, self._nonce = self._nonce, None
        self.phase = ProverPhase.COMPLETED
        check_exponent(self.params, challenge.c, name="challenge")
        s = self.math.respond(nonce, challenge.c, self._secret)
        return VerificationRequest(auth_id=challenge.auth_id, s=s)

    @property
    def secret(self) -> Optional[int]:
        return self._secret

    @property
    def pending(self) -> bool:
        return self._nonce is not None


__all__ = ["Prover", "ProverPhase"]
