"""
Commitment primitives for document authentication.

A commitment is SHA-256 over the raw content with a random nonce appended.
The same content registered twice yields unrelated commitments, while the
stored nonce lets the exact content be checked again later.
"""
import hashlib
import hmac
import logging
import secrets

logger = logging.getLogger(__name__)

NONCE_BYTES = 32
DIGEST_HEX_LENGTH = 64


def hash_content(data: bytes) -> str:
    """SHA-256 of the data as lowercase hex"""
    return hashlib.sha256(data).hexdigest()


def generate_nonce() -> bytes:
    """Fresh nonce from the OS CSPRNG"""
    return secrets.token_bytes(NONCE_BYTES)


def commit(content: bytes, nonce: bytes) -> str:
    """Commitment to content: hash(content || nonce)"""
    return hash_content(content + nonce)


def verify_commitment(content: bytes, nonce: str, expected_commitment: str) -> bool:
    """Recompute the commitment with the hex nonce and compare with the expected one"""
    try:
        nonce_bytes = bytes.fromhex(nonce)
    except ValueError:
        logger.error("Stored nonce is not valid hex, commitment cannot match")
        return False

    return hmac.compare_digest(commit(content, nonce_bytes), expected_commitment)
