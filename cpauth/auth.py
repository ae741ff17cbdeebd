"""Verifier state machine for registration, challenge issuance and verification."""

from __future__ import annotations

import logging
import secrets
from typing import Optional

from .codec import check_element, check_exponent
from .constants import SESSION_ID_BYTES
from .crypto import ChaumPedersen
from .exceptions import InvalidParameters, VerificationFailed
from .group import GroupParameters
from .messages import Challenge, ChallengeRequest, RegisterRequest, VerificationRequest
from .prover import Prover
from .store import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """The three calls a transport exposes to provers.

    Each call is a single round trip. Errors propagate to the caller and
    are never retried here.
    """

    def __init__(self, params: GroupParameters, store: Optional[SessionStore] = None) -> None:
        self.params = params
        self.math = ChaumPedersen(params)
        self.store = store if store is not None else SessionStore()

    def register(self, request: RegisterRequest) -> None:
        check_element(self.params, request.y1, name="y1")
        check_element(self.params, request.y2, name="y2")
        if not (self.params.in_subgroup(request.y1) and self.params.in_subgroup(request.y2)):
            raise InvalidParameters("Public values must belong to the order q subgroup")
        self.store.register_user(request.user, request.y1, request.y2)
        logger.info("Registered user %s", request.user)

    def create_authentication_challenge(self, request: ChallengeRequest) -> Challenge:
        check_element(self.params, request.r1, name="r1")
        check_element(self.params, request.r2, name="r2")
        purged = self.store.purge_expired()
        if purged:
            logger.debug("Purged %d expired challenges", purged)
        c = self.math.random_challenge()
        session = self.store.create_challenge(request.user, request.r1, request.r2, c)
        logger.info("Issued challenge %s for user %s", session.auth_id, request.user)
        return Challenge(auth_id=session.auth_id, c=c)

    def verify_authentication(self, request: VerificationRequest) -> str:
        # The session is consumed before any check, so a bad answer burns it.
        session = self.store.take_challenge(request.auth_id)
        check_exponent(self.params, request.s, name="s")
        record = self.store.get_user(session.user)
        if record is None or not self.math.verify(
            session.r1, session.r2, session.c, request.s, record.y1, record.y2
        ):
            logger.warning("Rejected proof for user %s", session.user)
            raise VerificationFailed(f"AuthId '{request.auth_id}' has an incorrect solution")
        session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
        logger.info("Authenticated user %s", session.user)
        return session_id


def authenticate(service: AuthService, prover: Prover) -> str:
    """Run one in-process challenge/response exchange and return the session id."""

    challenge = service.create_authentication_challenge(prover.begin_authentication())
    return service.verify_authentication(prover.answer(challenge))


__all__ = ["AuthService", "authenticate"]
