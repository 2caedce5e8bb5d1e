"""RSA signature over a message with a PEM private key.

Digest-then-sign with RSASSA-PKCS1-v1_5. With the default SHA-1 digest
this is the RSA-SHA1 method of OAuth 1.0 (RFC 5849 section 3.4.3).
"""

import base64
import binascii
import logging
from contextlib import nullcontext

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding

from reqsign.signing.backend import ensure_backend
from reqsign.signing.digests import DigestAlgorithm
from reqsign.signing.errors import (
    InvalidKeyError,
    KeyHandleClosedError,
    KeyParseError,
    SigningFailedError,
)
from reqsign.signing.keys import KeyHandle, load_public_key, parse_private_key

logger = logging.getLogger(__name__)


def _acquire(key: "bytes | str | KeyHandle"):
    """Return a context manager yielding a KeyHandle.

    Handles parsed here are closed when the context exits. A handle the
    caller passed in stays open; the caller owns it.
    """
    if isinstance(key, KeyHandle):
        return nullcontext(key)
    try:
        return parse_private_key(key)
    except KeyParseError as e:
        raise InvalidKeyError(e) from e


def rsa_signature(
    message: bytes,
    key: "bytes | str | KeyHandle",
    *,
    digest: DigestAlgorithm = DigestAlgorithm.SHA1,
) -> bytes:
    """Compute the raw PKCS#1 v1.5 signature bytes.

    Raises:
        InvalidKeyError: If key text cannot be parsed
        SigningFailedError: If the primitive rejects the key/digest pair
    """
    ensure_backend()

    with _acquire(key) as handle:
        try:
            return handle.key.sign(bytes(message), padding.PKCS1v15(), digest.hash_algorithm())
        except KeyHandleClosedError as e:
            raise SigningFailedError(str(e)) from e
        except (ValueError, TypeError) as e:
            raise SigningFailedError(f"RSA signing failed: {e}") from e


def sign_rsa(
    message: bytes,
    key: "bytes | str | KeyHandle",
    *,
    digest: DigestAlgorithm = DigestAlgorithm.SHA1,
) -> str:
    """Sign a message with an RSA private key.

    Args:
        message: Canonical message to sign
        key: PEM RSA private key text, or an open KeyHandle
        digest: Hash applied before signing

    Returns:
        Base64 (standard alphabet, padded) encoded signature

    Raises:
        InvalidKeyError: If key text cannot be parsed
        SigningFailedError: If no signature could be produced
    """
    return base64.b64encode(rsa_signature(message, key, digest=digest)).decode("ascii")


def verify_rsa(
    message: bytes,
    public_key_pem: bytes | str,
    signature: str,
    *,
    digest: DigestAlgorithm = DigestAlgorithm.SHA1,
) -> bool:
    """Verify a base64 PKCS#1 v1.5 signature with the matching public key.

    Returns:
        True if the signature is valid, False if it does not match or is
        not valid base64

    Raises:
        KeyParseError: If the public key cannot be parsed
    """
    public_key = load_public_key(public_key_pem)

    try:
        raw = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError):
        return False

    try:
        public_key.verify(raw, bytes(message), padding.PKCS1v15(), digest.hash_algorithm())
    except InvalidSignature:
        return False
    return True
