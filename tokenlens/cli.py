"""Command line interface: decode, verify and sign compact tokens."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import json
import os
import sys
from dataclasses import replace
from typing import List, Optional, Tuple

from .config import InspectorConfig
from .logging import configure_logging, get_logger
from .session import InspectionSession
from .signature.types import VerificationResult, VerificationStatus
from .token.issuer import TokenIssuer
from .token.types import DecodedToken, DecodeError

logger = get_logger("tokenlens.cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _read_token(value: str) -> str:
    return sys.stdin.read() if value == "-" else value


def _resolve_secret(value: Optional[str]) -> str:
    if value is not None:
        return value
    env_secret = os.getenv("TOKENLENS_SECRET")
    if env_secret is not None:
        return env_secret
    return getpass.getpass("Secret key: ")


def _print_json(value: object) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False, default=str))


def _report_decode_error(error: DecodeError) -> int:
    print(f"{error.kind.value}: {error.message}", file=sys.stderr)
    return EXIT_ERROR


def _warn_if_expired(token: DecodedToken) -> None:
    if token.is_expired:
        print("Warning: this token has expired.", file=sys.stderr)


def _cmd_decode(args: argparse.Namespace, config: InspectorConfig) -> int:
    session = InspectionSession(config)
    outcome = session.decode(_read_token(args.token))
    if isinstance(outcome, DecodeError):
        return _report_decode_error(outcome)
    _print_json(outcome.to_dict())
    _warn_if_expired(outcome)
    return EXIT_OK


VerifyOutcome = Tuple[Optional[DecodeError], Optional[VerificationResult], Optional[DecodedToken]]


async def _verify(token_text: str, secret: str, config: InspectorConfig) -> VerifyOutcome:
    from .exporters.postgres import create_exporter_from_env

    exporter = create_exporter_from_env(config)
    session = InspectionSession(config, exporter=exporter)
    try:
        outcome = session.decode(token_text)
        if isinstance(outcome, DecodeError):
            return outcome, None, None
        result = await session.verify(secret)
        return None, result, outcome
    finally:
        if exporter is not None:
            await exporter.close()


def _cmd_verify(args: argparse.Namespace, config: InspectorConfig) -> int:
    token_text = _read_token(args.token)
    secret = _resolve_secret(args.secret)
    error, result, token = asyncio.run(_verify(token_text, secret, config))
    if error is not None:
        return _report_decode_error(error)

    assert result is not None and token is not None
    _warn_if_expired(token)
    if result.is_error or result.status is VerificationStatus.UNSUPPORTED_ALGORITHM:
        print(f"{result.status.value}: {result.message}", file=sys.stderr)
        return EXIT_ERROR
    print(result.message)
    return EXIT_OK if result.valid else EXIT_INVALID


def _cmd_sign(args: argparse.Namespace, config: InspectorConfig) -> int:
    try:
        payload = json.loads(args.payload)
    except json.JSONDecodeError as exc:
        print(f"Invalid payload JSON: {exc}", file=sys.stderr)
        return EXIT_ERROR
    if not isinstance(payload, dict):
        print("Payload must be a JSON object.", file=sys.stderr)
        return EXIT_ERROR

    secret = _resolve_secret(args.secret)
    try:
        token = asyncio.run(TokenIssuer().issue(payload, secret, ttl_seconds=args.ttl))
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_ERROR
    print(token)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenlens",
        description="Decode compact signed tokens and verify HS256 signatures",
    )
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default from TOKENLENS_LOG_LEVEL or warning)",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    parser.add_argument("--utc", action="store_true", help="Format timestamp claims in UTC instead of local time")

    sub = parser.add_subparsers(dest="command", required=True)

    decode = sub.add_parser("decode", help="Decode a token and show its header and claims")
    decode.add_argument("token", help="Compact token, or '-' to read from stdin")
    decode.set_defaults(handler=_cmd_decode)

    verify = sub.add_parser("verify", help="Decode a token and verify its signature")
    verify.add_argument("token", help="Compact token, or '-' to read from stdin")
    verify.add_argument("--secret", type=str, default=None, help="Secret key (default: TOKENLENS_SECRET or prompt)")
    verify.set_defaults(handler=_cmd_verify)

    sign = sub.add_parser("sign", help="Issue an HS256 token for a JSON payload")
    sign.add_argument("--payload", type=str, required=True, help="Claims as a JSON object")
    sign.add_argument("--secret", type=str, default=None, help="Secret key (default: TOKENLENS_SECRET or prompt)")
    sign.add_argument("--ttl", type=int, default=None, help="Add iat/exp claims expiring after this many seconds")
    sign.set_defaults(handler=_cmd_sign)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = InspectorConfig.from_env()
    if args.utc:
        config = replace(config, display_timezone="utc")
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    try:
        configure_logging(config.log_level, json_output=args.json_logs)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_ERROR

    logger.debug("command_started", command=args.command)
    return args.handler(args, config)
