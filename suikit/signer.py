"""Ed25519 signer accounts and their Sui addresses."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from suikit.derive import derive_for_path

SIGNATURE_FLAG_ED25519 = 0x0
SIGNATURE_FLAG_SECP256K1 = 0x1
ADDRESS_LENGTH = 64
DERIVATION_PATH_ED25519 = "m/44'/784'/0'/0'/0'"
DERIVATION_PATH_SECP256K1 = "m/54'/784'/0'/0/0"

_MNEMONIC_WORD_COUNTS = frozenset({12, 15, 18, 21, 24})
_PBKDF2_ROUNDS = 2048


@dataclass(frozen=True)
class Signer:
    """An ed25519 account: 64-byte private key (seed then public key), public key, address."""

    private_key: bytes
    public_key: bytes
    address: str


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """Turn a mnemonic phrase into a 64-byte seed.

    Raises ValueError when the word count is not a valid mnemonic length.
    """
    if len(mnemonic.split()) not in _MNEMONIC_WORD_COUNTS:
        raise ValueError("Invalid mnenomic")
    return hashlib.pbkdf2_hmac(
        "sha512",
        mnemonic.encode("utf-8"),
        ("mnemonic" + passphrase).encode("utf-8"),
        _PBKDF2_ROUNDS,
        64,
    )


def new_signer(seed: bytes) -> Signer:
    """Build a signer from a 32-byte ed25519 seed."""
    seed = bytes(seed)
    if len(seed) != 32:
        raise ValueError(f"bad ed25519 seed length: {len(seed)}")
    public_key = (
        Ed25519PrivateKey.from_private_bytes(seed)
        .public_key()
        .public_bytes(Encoding.Raw, PublicFormat.Raw)
    )
    digest = hashlib.blake2b(
        bytes([SIGNATURE_FLAG_ED25519]) + public_key, digest_size=32
    ).hexdigest()
    return Signer(
        private_key=seed + public_key,
        public_key=public_key,
        address="0x" + digest[:ADDRESS_LENGTH],
    )


def new_signer_with_mnemonic(mnemonic: str) -> Signer:
    """Build the signer for the default ed25519 path of a mnemonic."""
    seed = mnemonic_to_seed(mnemonic, "")
    key = derive_for_path(DERIVATION_PATH_ED25519, seed)
    return new_signer(key.key)