"""Exceptions raised by the signing primitives.

Every failure reaches the caller as one of these types. Nothing in
this package retries a signature, swallows an error, or exits the
process; the caller decides how to surface a failed signature.
"""

from typing import Optional


class SigningError(Exception):
    """Exception raised when signing fails."""
    pass


class KeyParseError(SigningError):
    """Key text is not an unencrypted PEM RSA private key.

    Attributes:
        detail: Diagnostic from the underlying crypto library, if any
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        self.detail = detail
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidKeyError(SigningError):
    """Signing was refused because the key material could not be parsed."""

    def __init__(self, parse_error: KeyParseError):
        self.parse_error = parse_error
        super().__init__(f"Invalid signing key: {parse_error}")


class SigningFailedError(SigningError):
    """The signing primitive could not produce a signature for this key/digest."""
    pass


class KeyHandleClosedError(SigningError):
    """Exception raised when a released key handle is used."""
    pass


class UnsupportedDigestError(SigningError, ValueError):
    """Exception raised for an unknown digest algorithm name."""
    pass


class UnsupportedMethodError(SigningError, ValueError):
    """Exception raised for an unknown signature method name."""
    pass


class MessageEncodingError(SigningError, ValueError):
    """A str message or key cannot be encoded with the configured encoding."""
    pass
