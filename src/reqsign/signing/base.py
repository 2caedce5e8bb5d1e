"""Base interfaces for request signing.

Signing flow:
1. Caller builds the canonical message (base string) for its protocol
2. Caller submits the message and key to a signer backend
3. Signer returns a base64 signature, or a failed result with the error
4. Caller places the signature in the protocol parameter
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from reqsign.signing.digests import DigestAlgorithm
from reqsign.signing.errors import (
    InvalidKeyError,
    KeyHandleClosedError,
    KeyParseError,
    SigningError,
    SigningFailedError,
    UnsupportedDigestError,
    UnsupportedMethodError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "InvalidKeyError",
    "KeyHandleClosedError",
    "KeyParseError",
    "SignatureMethod",
    "SignatureResult",
    "SignerBackend",
    "SigningError",
    "SigningFailedError",
    "SigningRequest",
    "UnsupportedDigestError",
    "UnsupportedMethodError",
]


class SignatureMethod(str, Enum):
    """Signature algorithm family."""
    HMAC = "HMAC"   # Shared secret
    RSA = "RSA"     # PEM RSA private key

    def protocol_name(self, digest: DigestAlgorithm = DigestAlgorithm.SHA1) -> str:
        """Protocol method name, e.g. 'HMAC-SHA1' or 'RSA-SHA256'."""
        return f"{self.value}-{digest.method_suffix}"

    @classmethod
    def parse(cls, name: "str | SignatureMethod") -> tuple["SignatureMethod", Optional[DigestAlgorithm]]:
        """Split a method name into (method, digest).

        'HMAC-SHA1' -> (HMAC, SHA1); 'rsa' -> (RSA, None).

        Raises:
            UnsupportedMethodError: If the family is not HMAC or RSA
            UnsupportedDigestError: If the digest suffix is unknown
        """
        if isinstance(name, SignatureMethod):
            return name, None

        family, _, suffix = name.strip().upper().partition("-")
        try:
            method = cls(family)
        except ValueError:
            raise UnsupportedMethodError(f"Unsupported signature method: {name!r}")

        digest = DigestAlgorithm.from_name(suffix) if suffix else None
        return method, digest


@dataclass
class SigningRequest:
    """Request to sign a message.

    Attributes:
        method: Signature method the key belongs to
        message: Canonical message to sign (str is encoded per settings)
        key: Shared secret for HMAC, PEM private key text for RSA
        key_id: Optional key identifier for audit logging
        metadata: Optional metadata for audit logging
    """
    method: SignatureMethod
    message: bytes | str
    key: bytes | str
    key_id: Optional[str] = None
    metadata: Optional[dict] = None

    def __repr__(self) -> str:
        # Never render key material
        return f"SigningRequest(method={self.method.value}, key_id={self.key_id!r})"


@dataclass
class SignatureResult:
    """Result of signing operation.

    Attributes:
        success: Whether signing succeeded
        signature: Base64 signature
        method_name: Protocol method name, e.g. HMAC-SHA1
        error: Error message if signing failed
        error_type: Exception class name if signing failed
    """
    success: bool
    signature: Optional[str] = None
    method_name: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[str] = None


class SignerBackend(ABC):
    """Abstract base class for signing backends.

    sign_sync() raises typed SigningError subclasses. The async sign()
    turns those into failed SignatureResults, so one bad request is
    rejected without taking down the service handling it.
    """

    def __init__(self, method: SignatureMethod, digest: "DigestAlgorithm | str | None" = None):
        from reqsign.config import get_settings

        settings = get_settings()
        self.method = method
        self.digest = DigestAlgorithm.from_name(digest) if digest else settings.digest
        self._encode = settings.encode

    @property
    def method_name(self) -> str:
        return self.method.protocol_name(self.digest)

    @abstractmethod
    def sign_sync(self, message: bytes | str, key: bytes | str) -> str:
        """Sign a message.

        Args:
            message: Canonical message
            key: Key material for this backend

        Returns:
            Base64 signature

        Raises:
            SigningError: If signing fails
        """
        pass

    @abstractmethod
    def verify(self, message: bytes | str, key: bytes | str, signature: str) -> bool:
        """Verify a signature.

        Args:
            message: Canonical message
            key: Shared secret for HMAC, public key PEM for RSA
            signature: Base64 signature to check

        Returns:
            True if the signature matches
        """
        pass

    async def _execute(self, request: SigningRequest) -> str:
        return self.sign_sync(request.message, request.key)

    async def sign(self, request: SigningRequest) -> SignatureResult:
        """Sign a request, reporting failure in the result."""
        if request.method != self.method:
            error = UnsupportedMethodError(
                f"{self.__class__.__name__} cannot sign {request.method.value} requests"
            )
            return self._failure(request, error)

        try:
            signature = await self._execute(request)
        except SigningError as e:
            return self._failure(request, e)

        return SignatureResult(success=True, signature=signature, method_name=self.method_name)

    def _failure(self, request: SigningRequest, error: SigningError) -> SignatureResult:
        logger.warning(
            "%s signing failed for key_id=%s: %s",
            self.method_name,
            request.key_id or "(none)",
            type(error).__name__,
        )
        return SignatureResult(
            success=False,
            method_name=self.method_name,
            error=str(error),
            error_type=type(error).__name__,
        )

    async def health_check(self) -> bool:
        """Check if the signing backend is available.

        Returns:
            True if backend is ready to sign
        """
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(method={self.method_name})"
