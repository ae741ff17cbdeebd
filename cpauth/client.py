"""HTTP client that drives a prover through the three protocol calls."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type

import httpx

from .constants import DEFAULT_SERVER_URL
from .exceptions import (
    AuthError,
    InvalidParameters,
    UnknownChallenge,
    UnknownUser,
    UserAlreadyRegistered,
    VerificationFailed,
)
from .group import GroupParameters
from .messages import Challenge
from .prover import Prover

logger = logging.getLogger(__name__)

# A 404 means an unknown user on challenge creation and an unknown auth id on verification.
_REGISTER_ERRORS: Dict[int, Type[AuthError]] = {400: InvalidParameters, 409: UserAlreadyRegistered}
_CHALLENGE_ERRORS: Dict[int, Type[AuthError]] = {400: InvalidParameters, 404: UnknownUser}
_VERIFY_ERRORS: Dict[int, Type[AuthError]] = {
    400: InvalidParameters,
    403: VerificationFailed,
    404: UnknownChallenge,
}


class AuthClient:
    """Talk to a running verifier.

    ``http`` may be any ``httpx.Client``, which lets tests pass a FastAPI
    ``TestClient`` in place of a network connection.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        *,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_http = http is None
        self.http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "AuthClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _post(self, path: str, payload: Dict[str, str], errors: Dict[int, Type[AuthError]]) -> Dict[str, str]:
        response = self.http.post(path, json=payload)
        if response.status_code in errors:
            detail = response.json().get("detail", response.reason_phrase)
            raise errors[response.status_code](detail)
        response.raise_for_status()
        return response.json()

    def fetch_parameters(self) -> GroupParameters:
        response = self.http.get("/parameters")
        response.raise_for_status()
        return GroupParameters.from_dict(response.json())

    def register(self, prover: Prover) -> None:
        self._post("/register", prover.register().to_dict(), _REGISTER_ERRORS)
        logger.info("Registered %s", prover.user)

    def login(self, prover: Prover) -> str:
        """Run one authentication attempt and return the minted session id."""

        request = prover.begin_authentication()
        payload = self._post("/authentication/challenge", request.to_dict(), _CHALLENGE_ERRORS)
        challenge = Challenge.from_dict(payload)
        logger.debug("Received challenge %s", challenge.auth_id)
        answer = prover.answer(challenge)
        payload = self._post("/authentication/verify", answer.to_dict(), _VERIFY_ERRORS)
        return payload["session_id"]


__all__ = ["AuthClient"]
