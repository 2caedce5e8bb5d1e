"""Signer factory.

Selects the HMAC or RSA path for a signature method and keeps one
backend instance per (method, digest) pair.
"""

import logging
import threading
from typing import Optional

from reqsign.signing.base import SignatureMethod, SignerBackend
from reqsign.signing.digests import DigestAlgorithm

logger = logging.getLogger(__name__)

_signers: dict[tuple[SignatureMethod, DigestAlgorithm], SignerBackend] = {}
_signers_lock = threading.Lock()


def _create_signer(method: SignatureMethod, digest: DigestAlgorithm) -> SignerBackend:
    if method == SignatureMethod.RSA:
        from reqsign.signing.rsa_signer import RsaSigner
        return RsaSigner(digest)

    from reqsign.signing.hmac_signer import HmacSigner
    return HmacSigner(digest)


def get_signer(
    method: "SignatureMethod | str",
    digest: "DigestAlgorithm | str | None" = None,
) -> SignerBackend:
    """Get the signer for a signature method.

    Args:
        method: SignatureMethod or protocol name ('HMAC-SHA1', 'RSA-SHA256')
        digest: Digest override; a digest named in the method wins,
            then this argument, then settings

    Returns:
        SignerBackend instance

    Raises:
        UnsupportedMethodError: If the method is not HMAC or RSA
        UnsupportedDigestError: If the digest is unknown
    """
    from reqsign.config import get_settings

    signature_method, named_digest = SignatureMethod.parse(method)
    if named_digest is not None:
        resolved = named_digest
    elif digest is not None:
        resolved = DigestAlgorithm.from_name(digest)
    else:
        resolved = get_settings().digest

    cache_key = (signature_method, resolved)
    with _signers_lock:
        signer = _signers.get(cache_key)
        if signer is None:
            signer = _create_signer(signature_method, resolved)
            _signers[cache_key] = signer
            logger.info(f"Initialized {signer.method_name} signer")
    return signer


def reset_signers():
    """Drop cached signer instances (for testing)."""
    with _signers_lock:
        _signers.clear()


def sign(
    method: "SignatureMethod | str",
    message: bytes | str,
    key: bytes | str,
    digest: "DigestAlgorithm | str | None" = None,
) -> str:
    """Sign a message with the backend for ``method``.

    Returns:
        Base64 signature

    Raises:
        SigningError: If the method is unsupported or signing fails
    """
    return get_signer(method, digest).sign_sync(message, key)


def verify(
    method: "SignatureMethod | str",
    message: bytes | str,
    key: bytes | str,
    signature: str,
    digest: "DigestAlgorithm | str | None" = None,
) -> bool:
    """Verify a signature with the backend for ``method``."""
    return get_signer(method, digest).verify(message, key, signature)


async def get_signer_info(method: "SignatureMethod | str", digest: Optional[str] = None) -> dict:
    """Get information about a signer configuration.

    Returns:
        Dict with method name, health status and class
    """
    signer = get_signer(method, digest)
    health = await signer.health_check()

    return {
        "method": signer.method_name,
        "healthy": health,
        "class": signer.__class__.__name__,
    }
