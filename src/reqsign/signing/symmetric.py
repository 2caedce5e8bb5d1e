"""HMAC signature over a message with a shared secret.

Implements the RFC 2104 construction directly:

    HMAC(K, m) = H((K' ^ opad) || H((K' ^ ipad) || m))

where K' is the secret zero-padded to one hash block, or the hash of the
secret when it is longer than a block.

Reference:
- https://tools.ietf.org/html/rfc2104
"""

import base64
import binascii
import hmac

from reqsign.signing.digests import DigestAlgorithm

IPAD_BYTE = 0x36
OPAD_BYTE = 0x5C


def _block_key(secret: bytes, digest: DigestAlgorithm) -> bytes:
    """Condense and zero-pad the secret to exactly one block."""
    block_size = digest.block_size
    if len(secret) > block_size:
        secret = digest.new(secret).digest()
    return secret.ljust(block_size, b"\x00")


def hmac_digest(
    message: bytes,
    secret: bytes,
    *,
    digest: DigestAlgorithm = DigestAlgorithm.SHA1,
) -> bytes:
    """Compute the raw HMAC bytes for a message.

    Args:
        message: Canonical message to authenticate
        secret: Shared secret of any length
        digest: Hash function (block size drives padding)

    Returns:
        Raw MAC, digest.digest_size bytes long
    """
    key = _block_key(bytes(secret), digest)

    ipad = bytes(b ^ IPAD_BYTE for b in key)
    opad = bytes(b ^ OPAD_BYTE for b in key)

    inner = digest.new(ipad + bytes(message)).digest()
    return digest.new(opad + inner).digest()


def sign_hmac(
    message: bytes,
    secret: bytes,
    *,
    digest: DigestAlgorithm = DigestAlgorithm.SHA1,
) -> str:
    """Sign a message with a shared secret.

    Total over its inputs: any message and any secret (including empty)
    produce a signature, and identical inputs always produce the same one.

    Returns:
        Base64 (standard alphabet, padded) encoded MAC
    """
    return base64.b64encode(hmac_digest(message, secret, digest=digest)).decode("ascii")


def verify_hmac(
    message: bytes,
    secret: bytes,
    signature: str,
    *,
    digest: DigestAlgorithm = DigestAlgorithm.SHA1,
) -> bool:
    """Check a base64 HMAC signature in constant time.

    Returns False for a mismatching or malformed signature.
    """
    try:
        received = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError):
        return False
    return hmac.compare_digest(received, hmac_digest(message, secret, digest=digest))
