"""
Transaction signing for OCS01
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict

from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey

from .exceptions import SigningError

logger = logging.getLogger(__name__)

# Order the remote verifier serializes the signed fields in
SIGNING_FIELD_ORDER = ("from", "to_", "amount", "nonce", "ou", "timestamp")

SEED_SIZE = 32


def canonical_payload(fields: Dict[str, Any]) -> bytes:
    """
    Serialize transaction fields into the exact bytes that get signed.

    Compact JSON in SIGNING_FIELD_ORDER: nonce as a bare integer, timestamp
    as a bare float, everything else quoted.

    Args:
        fields: Mapping holding the six signed fields

    Returns:
        UTF-8 encoded canonical payload
    """
    ordered = {
        "from": str(fields["from"]),
        "to_": str(fields["to_"]),
        "amount": str(fields["amount"]),
        "nonce": int(fields["nonce"]),
        "ou": str(fields["ou"]),
        "timestamp": float(fields["timestamp"]),
    }
    return json.dumps(ordered, separators=(",", ":")).encode("utf-8")


class Signer:
    """
    Ed25519 signer owning the wallet's private key.

    Construct once at startup and pass it to whoever needs signatures.

    Example:
        >>> signer = Signer(wallet.private_key)
        >>> signature = signer.sign(tx.signing_fields())
    """

    def __init__(self, private_key_b64: str):
        """
        Args:
            private_key_b64: Base64 encoded 32-byte seed (a 64-byte
                seed + public key blob is also accepted)

        Raises:
            SigningError: If the key material cannot be decoded
        """
        try:
            raw = base64.b64decode(private_key_b64, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise SigningError(f"private key is not valid base64: {exc}") from exc
        self._key = self._load_seed(raw)

    @classmethod
    def from_seed(cls, seed: bytes) -> "Signer":
        signer = cls.__new__(cls)
        signer._key = cls._load_seed(seed)
        return signer

    @staticmethod
    def _load_seed(raw: bytes) -> SigningKey:
        if len(raw) == 2 * SEED_SIZE:
            raw = raw[:SEED_SIZE]
        if len(raw) != SEED_SIZE:
            raise SigningError(
                f"private key must be {SEED_SIZE} bytes, got {len(raw)}"
            )
        return SigningKey(raw)

    @property
    def public_key(self) -> bytes:
        return self._key.verify_key.encode()

    @property
    def public_key_b64(self) -> str:
        """Verification key as sent with transactions"""
        return base64.b64encode(self.public_key).decode("ascii")

    def sign(self, fields: Dict[str, Any]) -> bytes:
        """
        Sign transaction fields.

        Args:
            fields: The six signed fields (see canonical_payload)

        Returns:
            64-byte Ed25519 signature
        """
        message = canonical_payload(fields)
        logger.debug("signing payload %s", message)
        return self._key.sign(message).signature

    def sign_b64(self, fields: Dict[str, Any]) -> str:
        return base64.b64encode(self.sign(fields)).decode("ascii")

    def verify(self, fields: Dict[str, Any], signature: bytes) -> bool:
        """Check a signature against our own public key"""
        try:
            VerifyKey(self.public_key).verify(canonical_payload(fields), signature)
            return True
        except BadSignatureError:
            return False

