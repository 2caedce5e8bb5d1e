"""Request signing primitives.

Provides:
- sign_hmac / verify_hmac: shared-secret HMAC (RFC 2104)
- parse_private_key: PEM RSA private key -> scoped KeyHandle
- sign_rsa / verify_rsa: RSASSA-PKCS1-v1_5 digest-then-sign
- HmacSigner / RsaSigner: backends returning SignatureResults
"""

from reqsign.signing.asymmetric import sign_rsa, verify_rsa
from reqsign.signing.base import (
    SignatureMethod,
    SignatureResult,
    SignerBackend,
    SigningRequest,
)
from reqsign.signing.digests import DigestAlgorithm
from reqsign.signing.errors import (
    InvalidKeyError,
    KeyHandleClosedError,
    KeyParseError,
    MessageEncodingError,
    SigningError,
    SigningFailedError,
    UnsupportedDigestError,
    UnsupportedMethodError,
)
from reqsign.signing.factory import get_signer, sign, verify
from reqsign.signing.hmac_signer import HmacSigner
from reqsign.signing.keys import KeyHandle, parse_private_key
from reqsign.signing.rsa_signer import RsaSigner
from reqsign.signing.symmetric import sign_hmac, verify_hmac

__all__ = [
    "DigestAlgorithm",
    "HmacSigner",
    "InvalidKeyError",
    "KeyHandle",
    "KeyHandleClosedError",
    "KeyParseError",
    "MessageEncodingError",
    "RsaSigner",
    "SignatureMethod",
    "SignatureResult",
    "SignerBackend",
    "SigningError",
    "SigningFailedError",
    "SigningRequest",
    "UnsupportedDigestError",
    "UnsupportedMethodError",
    "get_signer",
    "parse_private_key",
    "sign",
    "sign_hmac",
    "sign_rsa",
    "verify",
    "verify_hmac",
    "verify_rsa",
]
