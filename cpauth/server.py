"""FastAPI-powered Chaum-Pedersen authentication service."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import messages
from .auth import AuthService
from .codec import bytes_to_int, encode_hex, hex_to_bytes
from .exceptions import (
    AuthError,
    InvalidParameters,
    UnknownChallenge,
    UnknownUser,
    UserAlreadyRegistered,
    VerificationFailed,
)
from .group import default_parameters

logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[Type[AuthError], int] = {
    InvalidParameters: 400,
    VerificationFailed: 403,
    UnknownUser: 404,
    UnknownChallenge: 404,
    UserAlreadyRegistered: 409,
}


class RegisterRequest(BaseModel):
    user: str = Field(min_length=1)
    y1: str
    y2: str


class RegisterResponse(BaseModel):
    pass


class ChallengeRequest(BaseModel):
    user: str = Field(min_length=1)
    r1: str
    r2: str


class ChallengeResponse(BaseModel):
    auth_id: str
    c: str


class VerifyRequest(BaseModel):
    auth_id: str
    s: str


class VerifyResponse(BaseModel):
    session_id: str


class ParametersResponse(BaseModel):
    p: str
    q: str
    alpha: str
    beta: str


def _to_int(value: str) -> int:
    return bytes_to_int(hex_to_bytes(value))


def status_for(exc: AuthError) -> int:
    for kind, status in ERROR_STATUS.items():
        if isinstance(exc, kind):
            return status
    return 400


def create_app(service: Optional[AuthService] = None) -> FastAPI:
    """Build the HTTP application around an injected ``AuthService``."""

    if service is None:
        service = AuthService(default_parameters())

    app = FastAPI(title="cpauth", description="Chaum-Pedersen zero-knowledge authentication")
    app.state.service = service

    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError) -> JSONResponse:
        status = status_for(exc)
        logger.info("%s %s -> %d %s", request.method, request.url.path, status, type(exc).__name__)
        return JSONResponse(status_code=status, content={"detail": str(exc)})

    # Plain def endpoints run in the threadpool, keeping exponentiation off the event loop.
    @app.get("/parameters", response_model=ParametersResponse)
    def parameters() -> ParametersResponse:
        return ParametersResponse(**service.params.to_dict())

    @app.post("/register", response_model=RegisterResponse)
    def register(request: RegisterRequest) -> RegisterResponse:
        service.register(
            messages.RegisterRequest(user=request.user, y1=_to_int(request.y1), y2=_to_int(request.y2))
        )
        return RegisterResponse()

    @app.post("/authentication/challenge", response_model=ChallengeResponse)
    def create_authentication_challenge(request: ChallengeRequest) -> ChallengeResponse:
        challenge = service.create_authentication_challenge(
            messages.ChallengeRequest(user=request.user, r1=_to_int(request.r1), r2=_to_int(request.r2))
        )
        return ChallengeResponse(auth_id=challenge.auth_id, c=encode_hex(challenge.c))

    @app.post("/authentication/verify", response_model=VerifyResponse)
    def verify_authentication(request: VerifyRequest) -> VerifyResponse:
        session_id = service.verify_authentication(
            messages.VerificationRequest(auth_id=request.auth_id, s=_to_int(request.s))
        )
        return VerifyResponse(session_id=session_id)

    return app


app = create_app()


__all__ = ["ERROR_STATUS", "app", "create_app", "status_for"]
