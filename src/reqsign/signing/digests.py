"""Digest algorithms shared by the HMAC and RSA signers.

SHA-1 is the default because OAuth 1.0 names it in both of its
signature methods (HMAC-SHA1, RSA-SHA1). Stronger digests are selected
through configuration without changing any signing contract.
"""

import hashlib
from enum import Enum

from cryptography.hazmat.primitives import hashes

from reqsign.signing.errors import UnsupportedDigestError


class DigestAlgorithm(str, Enum):
    """Hash function used for both signature paths."""
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def from_name(cls, name: "str | DigestAlgorithm") -> "DigestAlgorithm":
        """Look up a digest by name, accepting 'SHA1', 'sha-1', 'sha1'."""
        if isinstance(name, DigestAlgorithm):
            return name
        normalized = name.strip().lower().replace("-", "")
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedDigestError(f"Unsupported digest algorithm: {name!r}")

    @property
    def hashlib_name(self) -> str:
        return self.value

    @property
    def block_size(self) -> int:
        """HMAC block size in bytes (64 for SHA-1/SHA-256, 128 for SHA-512)."""
        return hashlib.new(self.hashlib_name).block_size

    @property
    def digest_size(self) -> int:
        return hashlib.new(self.hashlib_name).digest_size

    @property
    def method_suffix(self) -> str:
        """Suffix used in protocol method names, e.g. HMAC-SHA1."""
        return self.value.upper()

    def new(self, data: bytes = b""):
        """Create a hashlib hash object for this digest."""
        return hashlib.new(self.hashlib_name, data)

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return the cryptography hash instance for RSA signing."""
        return _CRYPTOGRAPHY_HASHES[self]()


_CRYPTOGRAPHY_HASHES = {
    DigestAlgorithm.SHA1: hashes.SHA1,
    DigestAlgorithm.SHA256: hashes.SHA256,
    DigestAlgorithm.SHA512: hashes.SHA512,
}
