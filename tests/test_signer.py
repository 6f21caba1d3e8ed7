import string

import pytest
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from suikit.derive import derive_for_path
from suikit.signer import (
    ADDRESS_LENGTH,
    DERIVATION_PATH_ED25519,
    mnemonic_to_seed,
    new_signer,
    new_signer_with_mnemonic,
)

MNEMONIC = " ".join(["abandon"] * 11 + ["about"])


def test_new_signer_layout():
    seed = bytes(range(32))
    account = new_signer(seed)
    assert account.private_key[:32] == seed
    assert account.private_key[32:] == account.public_key
    assert len(account.public_key) == 32


def test_address_format():
    account = new_signer(bytes(32))
    assert account.address.startswith("0x")
    assert len(account.address) == 2 + ADDRESS_LENGTH
    assert set(account.address[2:]) <= set(string.hexdigits.lower())


def test_new_signer_is_deterministic_and_seed_dependent():
    assert new_signer(bytes(32)) == new_signer(bytes(32))
    assert new_signer(bytes(32)).address != new_signer(b"\x01" * 32).address


def test_public_key_verifies_signature():
    seed = b"\x07" * 32
    account = new_signer(seed)
    signature = Ed25519PrivateKey.from_private_bytes(seed).sign(b"payload")
    public = Ed25519PublicKey.from_public_bytes(account.public_key)
    with pytest.raises(InvalidSignature):
        public.verify(signature, b"tampered")


def test_bad_seed_length():
    with pytest.raises(ValueError):
        new_signer(b"\x00" * 31)


def test_mnemonic_to_seed_properties():
    seed = mnemonic_to_seed(MNEMONIC, "")
    assert len(seed) == 64
    assert seed == mnemonic_to_seed(MNEMONIC, "")
    assert seed != mnemonic_to_seed(MNEMONIC, "extra")


@pytest.mark.parametrize("count", [0, 1, 11, 13, 25])
def test_mnemonic_word_count_rejected(count):
    with pytest.raises(ValueError):
        mnemonic_to_seed(" ".join(["abandon"] * count), "")


def test_signer_with_mnemonic_uses_default_path():
    account = new_signer_with_mnemonic(MNEMONIC)
    key = derive_for_path(DERIVATION_PATH_ED25519, mnemonic_to_seed(MNEMONIC, ""))
    assert account.public_key == key.public_key()
    assert account.private_key[:32] == key.key


def test_signer_with_bad_mnemonic():
    with pytest.raises(ValueError):
        new_signer_with_mnemonic("too short")