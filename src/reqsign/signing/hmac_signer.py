"""HMAC signing backend.

Signs with a shared secret (OAuth HMAC-SHA1 by default). For OAuth 1.0
the caller passes the already-joined "consumer_secret&token_secret"
string as the key.
"""

import logging

from reqsign.signing.base import SignatureMethod, SignerBackend
from reqsign.signing.digests import DigestAlgorithm
from reqsign.signing.symmetric import sign_hmac, verify_hmac

logger = logging.getLogger(__name__)


class HmacSigner(SignerBackend):
    """Shared-secret signing backend.

    HMAC is total over its inputs, so sign_sync() never raises.
    """

    def __init__(self, digest: "DigestAlgorithm | str | None" = None):
        super().__init__(SignatureMethod.HMAC, digest)

    def sign_sync(self, message: bytes | str, key: bytes | str) -> str:
        return sign_hmac(self._encode(message), self._encode(key), digest=self.digest)

    def verify(self, message: bytes | str, key: bytes | str, signature: str) -> bool:
        return verify_hmac(self._encode(message), self._encode(key), signature, digest=self.digest)
