"""RSA signing backend.

Signs with a PEM RSA private key supplied per call. Keys are parsed,
used and released inside each call; nothing is cached between calls.
"""

import asyncio
import logging

from reqsign.signing.asymmetric import sign_rsa, verify_rsa
from reqsign.signing.backend import ensure_backend
from reqsign.signing.base import SignatureMethod, SignerBackend, SigningRequest
from reqsign.signing.digests import DigestAlgorithm

logger = logging.getLogger(__name__)


class RsaSigner(SignerBackend):
    """Private-key signing backend (OAuth RSA-SHA1 by default).

    RSA signing is CPU-bound, so the async sign() runs it in the
    default executor to keep the event loop responsive.
    """

    def __init__(self, digest: "DigestAlgorithm | str | None" = None):
        super().__init__(SignatureMethod.RSA, digest)

    def sign_sync(self, message: bytes | str, key: bytes | str) -> str:
        return sign_rsa(self._encode(message), key, digest=self.digest)

    def verify(self, message: bytes | str, key: bytes | str, signature: str) -> bool:
        return verify_rsa(self._encode(message), key, signature, digest=self.digest)

    async def _execute(self, request: SigningRequest) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            lambda: self.sign_sync(request.message, request.key),
        )

    async def health_check(self) -> bool:
        """Check that the crypto backend loads."""
        try:
            ensure_backend()
        except ImportError as e:
            logger.error(f"RSA backend unavailable: {e}")
            return False
        return True
