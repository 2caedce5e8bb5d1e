"""Tests for the HMAC signature path."""

import base64
import hashlib
import hmac

import pytest

from reqsign.signing.digests import DigestAlgorithm
from reqsign.signing.symmetric import hmac_digest, sign_hmac, verify_hmac

OAUTH_BASE_STRING = (
    b"GET&http%3A%2F%2Fphotos.example.net%2Fphotos&file%3Dvacation.jpg"
    b"%26oauth_consumer_key%3Ddpf43f3p2l4k3l03%26oauth_nonce%3Dkllo9940pd9333jh"
    b"%26oauth_signature_method%3DHMAC-SHA1%26oauth_timestamp%3D1191242096"
    b"%26oauth_token%3Dnnch734d00sl2jdk%26oauth_version%3D1.0%26size%3Doriginal"
)


def reference_hmac_sha1(message: bytes, secret: bytes) -> bytes:
    """Straightforward RFC 2104 HMAC-SHA1, written out step by step."""
    if len(secret) > 64:
        secret = hashlib.sha1(secret).digest()
    secret = secret + b"\x00" * (64 - len(secret))
    ipad = bytes(b ^ 0x36 for b in secret)
    opad = bytes(b ^ 0x5C for b in secret)
    inner = hashlib.sha1(ipad + message).digest()
    return hashlib.sha1(opad + inner).digest()


class TestKnownAnswers:
    """HMAC-SHA1 test vectors."""

    def test_quick_brown_fox(self):
        """Test the widely published key='key' vector."""
        signature = sign_hmac(b"The quick brown fox jumps over the lazy dog", b"key")
        assert signature == "3nybhbi3iqa8ino29wqQcBydtNk="

    def test_rfc2202_case_1(self):
        """Test RFC 2202 test case 1 (20-byte 0x0b key)."""
        assert sign_hmac(b"Hi There", b"\x0b" * 20) == "thcxhlUFcmTii8C2+zeMjvFGvgA="

    def test_rfc2202_case_6_long_key(self):
        """Test RFC 2202 test case 6 (80-byte key is hashed first)."""
        message = b"Test Using Larger Than Block-Size Key - Hash Key First"
        assert sign_hmac(message, b"\xaa" * 80) == "qkrl4VJy0A6VcFY3zoo7Ve1AIRI="

    def test_empty_message_and_secret(self):
        """Test that empty inputs are signed, not rejected."""
        assert sign_hmac(b"", b"") == "+9sdGxiqbAgyS31ktx+3Y3BpDh0="

    def test_oauth_photos_example(self):
        """Test the OAuth 1.0 photos.example.net HMAC-SHA1 example."""
        secret = b"kd94hf93k423kf44&pfkkdhi9sl3r4s00"
        assert sign_hmac(OAUTH_BASE_STRING, secret) == "tR3+Ty81lMeYAr/Fid0kMTYa/WM="

    def test_sha256_digest(self):
        """Test that a configured SHA-256 digest yields HMAC-SHA256."""
        signature = sign_hmac(
            b"The quick brown fox jumps over the lazy dog",
            b"key",
            digest=DigestAlgorithm.SHA256,
        )
        assert signature == "97yD9DBThCSxMpjmqm+xQ+9NWaFJRhdZl0edvC0aPNg="


class TestSecretLengthBoundary:
    """Secrets at and around the 64-byte block size."""

    def test_64_byte_secret_used_directly(self):
        """Test a block-sized secret is padded, not hashed."""
        secret = b"k" * 64
        expected = reference_hmac_sha1(b"msg", secret)

        assert hmac_digest(b"msg", secret) == expected
        assert sign_hmac(b"msg", secret) == "GzcpVcUWK4uiChl0gzSY0/fscoo="

    def test_65_byte_secret_is_hashed(self):
        """Test a secret one byte over the block size is hashed first."""
        secret = b"k" * 65
        expected = reference_hmac_sha1(b"msg", secret)

        assert hmac_digest(b"msg", secret) == expected
        assert sign_hmac(b"msg", secret) == "t1oGce0t4DnAM+VED0v4Vk83/v4="

    def test_65_byte_secret_equals_its_hash(self):
        """Test that a long secret and its SHA-1 digest sign identically."""
        secret = b"k" * 65
        condensed = hashlib.sha1(secret).digest()

        assert sign_hmac(b"msg", secret) == sign_hmac(b"msg", condensed)

    def test_64_byte_secret_differs_from_its_hash(self):
        """Test that a block-sized secret is not condensed."""
        secret = b"k" * 64
        condensed = hashlib.sha1(secret).digest()

        assert sign_hmac(b"msg", secret) != sign_hmac(b"msg", condensed)

    @pytest.mark.parametrize("length", [0, 1, 20, 63, 64, 65, 128, 1000])
    def test_matches_stdlib_hmac(self, length):
        """Test agreement with the standard library across secret lengths."""
        secret = bytes(range(256)) * 4
        secret = secret[:length]
        message = b"payload-" + str(length).encode()

        assert hmac_digest(message, secret) == hmac.new(secret, message, hashlib.sha1).digest()


class TestSignatureEncoding:
    """Determinism and base64 output."""

    def test_deterministic(self):
        """Test identical inputs give identical signatures."""
        first = sign_hmac(b"GET&http%3A%2F%2Fexample.com", b"secret&token")
        second = sign_hmac(b"GET&http%3A%2F%2Fexample.com", b"secret&token")
        assert first == second

    def test_different_secrets_differ(self):
        assert sign_hmac(b"message", b"secret-a") != sign_hmac(b"message", b"secret-b")

    def test_base64_decodes_to_raw_mac(self):
        """Test the signature decodes to exactly the 20 raw MAC bytes."""
        message, secret = b"non-ascii \xc3\xa9\xe2\x82\xac payload", b"s3cr3t"
        signature = sign_hmac(message, secret)
        raw = base64.b64decode(signature, validate=True)

        assert raw == hmac_digest(message, secret)
        assert len(raw) == 20
        assert signature.endswith("=")

    def test_sha512_uses_128_byte_block(self):
        """Test SHA-512 pads to its own block size."""
        secret = b"x" * 100  # over 64, under 128
        expected = hmac.new(secret, b"data", hashlib.sha512).digest()
        assert hmac_digest(b"data", secret, digest=DigestAlgorithm.SHA512) == expected


class TestVerifyHmac:
    """Tests for verify_hmac."""

    def test_valid_signature(self):
        signature = sign_hmac(b"message", b"secret")
        assert verify_hmac(b"message", b"secret", signature)

    def test_tampered_message(self):
        signature = sign_hmac(b"message", b"secret")
        assert not verify_hmac(b"message!", b"secret", signature)

    def test_wrong_secret(self):
        signature = sign_hmac(b"message", b"secret")
        assert not verify_hmac(b"message", b"other", signature)

    def test_malformed_base64(self):
        """Test that garbage signatures are rejected, not raised."""
        assert not verify_hmac(b"message", b"secret", "not base64!!")
        assert not verify_hmac(b"message", b"secret", "")
