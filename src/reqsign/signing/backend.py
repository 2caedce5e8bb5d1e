"""One-time crypto library setup.

The OpenSSL binding is loaded and checked once per process and never
torn down, so concurrent signing calls share no per-call global setup.
"""

import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)

_init_lock = threading.Lock()
_backend_info: Optional[dict] = None


def ensure_backend() -> dict:
    """Initialize the crypto backend exactly once.

    Safe to call from any thread on every signing call; only the first
    call does any work.

    Returns:
        Dict with the cryptography and OpenSSL versions in use
    """
    global _backend_info

    if _backend_info is not None:
        return _backend_info

    with _init_lock:
        if _backend_info is None:
            import cryptography
            from cryptography.hazmat.backends.openssl import backend as openssl_backend

            info = {
                "cryptography": cryptography.__version__,
                "openssl": openssl_backend.openssl_version_text(),
            }
            logger.info(
                "Crypto backend ready: cryptography %s, %s",
                info["cryptography"],
                info["openssl"],
            )
            _backend_info = info

    return _backend_info


def backend_info() -> Optional[dict]:
    """Return backend versions, or None if not initialized yet."""
    return _backend_info
