import pytest
from argon2.exceptions import InvalidHashError, VerificationError

from credauth.auth.passwords import dummy_verify, hash_password, verify_password


def test_hash_is_not_plaintext_and_is_salted():
    h1 = hash_password("s3cret")
    h2 = hash_password("s3cret")
    assert h1 != "s3cret"
    assert "s3cret" not in h1
    assert h1.startswith("$argon2id$")
    # fresh salt per call
    assert h1 != h2


def test_verify_accepts_correct_and_rejects_wrong():
    h = hash_password("s3cret")
    assert verify_password(h, "s3cret") is True
    assert verify_password(h, "S3cret") is False
    assert verify_password(h, "") is False
    assert verify_password("", "s3cret") is False


def test_empty_password_cannot_be_hashed():
    with pytest.raises(ValueError):
        hash_password("")


def test_malformed_hash_is_a_fault_not_a_mismatch():
    with pytest.raises((InvalidHashError, VerificationError)):
        verify_password("not-a-hash", "s3cret")


def test_dummy_verify_returns_nothing():
    assert dummy_verify("whatever") is None
    assert dummy_verify("") is None
