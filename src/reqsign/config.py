"""Application configuration using pydantic-settings.

Only the signer backends and the CLI read these settings. The core
signing functions take every parameter explicitly.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reqsign.signing.digests import DigestAlgorithm
from reqsign.signing.errors import MessageEncodingError


class Settings(BaseSettings):
    """Settings loaded from REQSIGN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REQSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Signing
    # ======================
    digest: DigestAlgorithm = Field(
        default=DigestAlgorithm.SHA1,
        description="Digest used by HMAC and RSA signers (sha1 for OAuth 1.0 compatibility)",
    )
    message_encoding: str = Field(
        default="utf-8",
        description="Encoding applied to str messages and secrets before signing",
    )

    # ======================
    # Logging
    # ======================
    debug: bool = Field(default=False, description="Enable debug logging")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format string",
    )

    @field_validator("digest", mode="before")
    @classmethod
    def parse_digest(cls, value):
        """Accept the same spellings as DigestAlgorithm.from_name ('SHA1', 'sha-1')."""
        if isinstance(value, str):
            return DigestAlgorithm.from_name(value)
        return value

    def encode(self, value: bytes | str) -> bytes:
        """Encode a str with the configured message encoding; bytes pass through.

        Raises:
            MessageEncodingError: If the encoding is unknown or cannot
                represent the text
        """
        if isinstance(value, bytes):
            return value
        try:
            return value.encode(self.message_encoding)
        except UnicodeEncodeError as e:
            raise MessageEncodingError(
                f"Cannot encode text as {self.message_encoding}: {e.reason} at position {e.start}"
            ) from e
        except LookupError as e:
            raise MessageEncodingError(f"Unknown message encoding: {self.message_encoding!r}") from e

    def get_safe_dict(self) -> dict:
        """Return settings dict for diagnostics."""
        return {
            "digest": self.digest.value,
            "message_encoding": self.message_encoding,
            "debug": self.debug,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
