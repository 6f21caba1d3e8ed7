import pytest
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from suikit.derive import (
    FIRST_HARDENED_INDEX,
    InvalidPathError,
    Key,
    NoPublicDerivationError,
    derive_for_path,
    is_valid_path,
    new_master_key,
)

SEED = bytes.fromhex("000102030405060708090a0b0c0d0e0f")


def test_master_key_matches_published_vector():
    master = new_master_key(SEED)
    assert master.chain_code.hex() == (
        "90046a93de5380a72b5e45010748567d5ea02bbf6522f979e05c0d8d8ca9fffb"
    )
    assert master.key.hex() == (
        "2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7"
    )


def test_master_public_key_matches_published_vector():
    assert new_master_key(SEED).public_key().hex() == (
        "a4b2856bfec510abab89753fac1ac0e1112364e7d250545963f135f2a33188ed"
    )


def test_single_segment_path_equals_hardened_child():
    assert derive_for_path("m/0'", SEED) == new_master_key(SEED).derive(FIRST_HARDENED_INDEX)


def test_path_derivation_chains():
    parent = derive_for_path("m/44'", SEED)
    child = derive_for_path("m/44'/784'", SEED)
    assert child == parent.derive(784 + FIRST_HARDENED_INDEX)
    assert len(child.key) == 32
    assert len(child.chain_code) == 32


def test_non_hardened_index_rejected():
    with pytest.raises(NoPublicDerivationError):
        new_master_key(SEED).derive(5)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("m/44'/784'/0'/0'/0'", True),
        ("m/54'/784'/0'/0/0", False),
        ("m", False),
        ("m/", False),
        ("m/4294967295'", True),
        ("m/4294967296'", False),
        ("m/1'\n", False),
        ("x/1'", False),
    ],
)
def test_is_valid_path(path, expected):
    assert is_valid_path(path) is expected


def test_invalid_path_raises():
    with pytest.raises(InvalidPathError):
        derive_for_path("m/54'/784'/0'/0/0", SEED)


def test_index_overflow_wraps_to_public_index():
    with pytest.raises(NoPublicDerivationError):
        derive_for_path("m/2147483648'", SEED)


def test_raw_seed_is_key_bytes():
    key = derive_for_path("m/44'/784'/0'/0'/0'", SEED)
    assert key.raw_seed() == key.key
    assert Key(key=b"\x01\x02", chain_code=b"").raw_seed() == b"\x01\x02" + bytes(30)


def test_public_key_verifies_signatures():
    key = derive_for_path("m/44'/784'/0'/0'/0'", SEED)
    signature = Ed25519PrivateKey.from_private_bytes(key.key).sign(b"message")
    public = Ed25519PublicKey.from_public_bytes(key.public_key())
    with pytest.raises(InvalidSignature):
        public.verify(signature, b"other message")
    assert len(key.public_key()) == 32


def test_public_key_of_short_key_fails():
    with pytest.raises(ValueError):
        Key(key=b"\x00" * 10, chain_code=b"").public_key()