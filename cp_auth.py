"""Command line interface for the Chaum-Pedersen authentication service."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from cpauth.auth import AuthService, authenticate
from cpauth.client import AuthClient
from cpauth.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SERVER_URL
from cpauth.crypto import ChaumPedersen, derive_secret
from cpauth.exceptions import AuthError, InvalidParameters
from cpauth.group import GroupParameters, load_parameters
from cpauth.prover import Prover
from cpauth.store import SessionStore


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--params",
        help="JSON file with hex encoded p, q, alpha and beta (default: RFC 5114 group)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the verifier HTTP service")
    serve_parser.add_argument("--host", default=DEFAULT_HOST)
    serve_parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    serve_parser.add_argument(
        "--ttl",
        type=float,
        help="Seconds after which an unanswered challenge expires (default: never)",
    )

    subparsers.add_parser("keygen", help="Generate a random secret and its public values")

    for name, help_text in (
        ("register", "Register a user with a running verifier"),
        ("login", "Authenticate a registered user against a running verifier"),
    ):
        client_parser = subparsers.add_parser(name, help=help_text)
        client_parser.add_argument("user", help="User name known to the verifier")
        client_parser.add_argument(
            "--url",
            default=DEFAULT_SERVER_URL,
            help=f"Verifier base URL (default: {DEFAULT_SERVER_URL})",
        )
        _add_secret_arguments(client_parser)

    demo_parser = subparsers.add_parser(
        "demo",
        help="Register and authenticate in-process without a network transport",
    )
    demo_parser.add_argument("user", nargs="?", default="alice")
    _add_secret_arguments(demo_parser)

    return parser.parse_args(argv)


def _add_secret_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--password", help="Password the secret exponent is derived from")
    group.add_argument("--secret", help="Hex-encoded secret exponent")


def resolve_secret(namespace: argparse.Namespace, params: GroupParameters) -> int | None:
    if namespace.password:
        return derive_secret(namespace.password, params)
    if namespace.secret:
        try:
            return int(namespace.secret, 16)
        except ValueError as exc:
            raise InvalidParameters("Secret must be hex encoded") from exc
    return None


def run_server(namespace: argparse.Namespace, params: GroupParameters) -> int:
    import uvicorn

    from cpauth.server import create_app

    service = AuthService(params, SessionStore(ttl=namespace.ttl))
    uvicorn.run(
        create_app(service),
        host=namespace.host,
        port=namespace.port,
        log_level=namespace.log_level.lower(),
    )
    return 0


def run_keygen(params: GroupParameters) -> dict:
    math = ChaumPedersen(params)
    secret = math.random_exponent()
    y1, y2 = math.public_pair(secret)
    return {"secret": hex(secret), "y1": hex(y1), "y2": hex(y2)}


def run_register(namespace: argparse.Namespace) -> dict:
    with AuthClient(namespace.url) as client:
        params = client.fetch_parameters()
        secret = resolve_secret(namespace, params)
        prover = Prover(namespace.user, params).initialize(secret)
        client.register(prover)
    payload = {"user": namespace.user, "y1": hex(prover.y1), "y2": hex(prover.y2)}
    if secret is None:
        payload["secret"] = hex(prover.secret)
    return payload


def run_login(namespace: argparse.Namespace) -> dict:
    with AuthClient(namespace.url) as client:
        params = client.fetch_parameters()
        secret = resolve_secret(namespace, params)
        if secret is None:
            raise AuthError("login requires --password or --secret")
        prover = Prover(namespace.user, params).restore(secret)
        session_id = client.login(prover)
    return {"user": namespace.user, "session_id": session_id}


def run_demo(namespace: argparse.Namespace, params: GroupParameters) -> dict:
    service = AuthService(params)
    prover = Prover(namespace.user, params).initialize(resolve_secret(namespace, params))
    service.register(prover.register())
    session_id = authenticate(service, prover)
    return {"user": namespace.user, "session_id": session_id}


def main(argv: list[str] | None = None) -> int:
    namespace = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=getattr(logging, namespace.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if namespace.command == "serve":
            return run_server(namespace, load_parameters(namespace.params))
        if namespace.command == "keygen":
            payload = run_keygen(load_parameters(namespace.params))
        elif namespace.command == "register":
            payload = run_register(namespace)
        elif namespace.command == "login":
            payload = run_login(namespace)
        elif namespace.command == "demo":
            payload = run_demo(namespace, load_parameters(namespace.params))
        else:
            raise RuntimeError("Unreachable")
    except AuthError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
