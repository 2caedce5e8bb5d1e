"""reqsign - HMAC and RSA signatures for OAuth-style request signing."""

from reqsign.signing import (
    DigestAlgorithm,
    InvalidKeyError,
    KeyParseError,
    SignatureMethod,
    SigningError,
    SigningFailedError,
    parse_private_key,
    sign,
    sign_hmac,
    sign_rsa,
    verify,
)

__version__ = "0.1.0"

__all__ = [
    "DigestAlgorithm",
    "InvalidKeyError",
    "KeyParseError",
    "SignatureMethod",
    "SigningError",
    "SigningFailedError",
    "parse_private_key",
    "sign",
    "sign_hmac",
    "sign_rsa",
    "verify",
]
