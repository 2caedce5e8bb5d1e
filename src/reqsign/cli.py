#!/usr/bin/env python3
"""Command-line signing and verification.

Usage:
    reqsign sign --method HMAC-SHA1 --key-file secret.txt --message "GET&..."
    reqsign sign --method RSA-SHA1 --key-file private.pem < base_string.txt
    reqsign verify --method RSA-SHA1 --key-file public.pem --signature "..." --message "..."
    reqsign info

The message is read from stdin, byte for byte, when --message is omitted.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from reqsign.config import get_settings
from reqsign.signing import SigningError, get_signer
from reqsign.signing.backend import ensure_backend

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from settings."""
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=log_level, format=settings.log_format)


def _read_message(args: argparse.Namespace) -> bytes:
    if args.message is not None:
        return get_settings().encode(args.message)
    return sys.stdin.buffer.read()


def _read_key(path: str) -> bytes:
    return Path(path).read_bytes()


def cmd_sign(args: argparse.Namespace) -> int:
    signer = get_signer(args.method, args.digest)
    signature = signer.sign_sync(_read_message(args), _read_key(args.key_file))
    print(signature)
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    signer = get_signer(args.method, args.digest)
    valid = signer.verify(_read_message(args), _read_key(args.key_file), args.signature)
    print("valid" if valid else "invalid")
    return 0 if valid else 1


def cmd_info(args: argparse.Namespace) -> int:
    info = {
        "settings": get_settings().get_safe_dict(),
        "backend": ensure_backend(),
    }
    print(json.dumps(info, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reqsign",
        description="Sign and verify request base strings with HMAC or RSA",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--method", required=True, help="Signature method, e.g. HMAC-SHA1 or RSA-SHA1")
        sub.add_argument("--digest", default=None, help="Digest when --method has none (sha1, sha256, sha512)")
        sub.add_argument("--key-file", required=True, help="Shared secret or PEM key file")
        sub.add_argument("--message", default=None, help="Message to sign (default: read stdin)")

    sign_parser = subparsers.add_parser("sign", help="Sign a message")
    add_common(sign_parser)
    sign_parser.set_defaults(func=cmd_sign)

    verify_parser = subparsers.add_parser("verify", help="Verify a signature")
    add_common(verify_parser)
    verify_parser.add_argument("--signature", required=True, help="Base64 signature to check")
    verify_parser.set_defaults(func=cmd_verify)

    info_parser = subparsers.add_parser("info", help="Show settings and crypto backend versions")
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        return args.func(args)
    except SigningError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read key file: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
