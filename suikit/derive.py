"""Hierarchical ed25519 key derivation for hardened BIP-44 style paths."""

from __future__ import annotations

import hashlib
import hmac
import re
from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

FIRST_HARDENED_INDEX = 0x80000000
_UINT32_MAX = 0xFFFFFFFF
_SEED_MODIFIER = b"ed25519 seed"
_PATH_PATTERN = re.compile(r"m(/[0-9]+')+")


class InvalidPathError(ValueError):
    """Raised for a derivation path that is malformed or out of range."""

    def __init__(self, message: str = "invalid derivation path") -> None:
        super().__init__(message)


class NoPublicDerivationError(ValueError):
    """Raised when a non-hardened index is requested."""

    def __init__(self, message: str = "no public derivation for ed25519") -> None:
        super().__init__(message)


def _split_digest(secret: bytes, data: bytes) -> "Key":
    digest = hmac.new(secret, data, hashlib.sha512).digest()
    return Key(key=digest[:32], chain_code=digest[32:])


@dataclass(frozen=True)
class Key:
    """A derived private key together with its chain code."""

    key: bytes
    chain_code: bytes

    def derive(self, index: int) -> "Key":
        """Derive the hardened child key at ``index``."""
        if index < FIRST_HARDENED_INDEX:
            raise NoPublicDerivationError()
        data = b"\x00" + self.key + (index & _UINT32_MAX).to_bytes(4, "big")
        return _split_digest(self.chain_code, data)

    def public_key(self) -> bytes:
        """Return the raw 32-byte ed25519 public key for this private key."""
        if len(self.key) < 32:
            raise ValueError("private key is shorter than 32 bytes")
        private = Ed25519PrivateKey.from_private_bytes(self.key[:32])
        return private.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    def raw_seed(self) -> bytes:
        """Return the key material as exactly 32 bytes."""
        return self.key[:32].ljust(32, b"\x00")


def new_master_key(seed: bytes) -> Key:
    """Generate the master key from a seed."""
    return _split_digest(_SEED_MODIFIER, bytes(seed))


def _path_indices(path: str) -> list[int]:
    return [int(segment.rstrip("'")) for segment in path.split("/")[1:]]


def is_valid_path(path: str) -> bool:
    """Tell whether ``path`` is a fully hardened path whose indices fit in 32 bits."""
    if not _PATH_PATTERN.fullmatch(path):
        return False
    return all(index <= _UINT32_MAX for index in _path_indices(path))


def derive_for_path(path: str, seed: bytes) -> Key:
    """Derive the key for a hardened path such as ``m/44'/784'/0'/0'/0'``."""
    if not is_valid_path(path):
        raise InvalidPathError()
    key = new_master_key(seed)
    for index in _path_indices(path):
        key = key.derive((index + FIRST_HARDENED_INDEX) & _UINT32_MAX)
    return key