import pytest

from credstore.domain.errors import PasswordPolicyError
from credstore.utils import MAX_PASSWORD_BYTES, gen_salt, get_password_hash, verify_password


def test_gen_salt_is_bcrypt_salt_with_requested_cost():
    salt = gen_salt(4)

    assert salt.startswith("$2b$04$")
    assert len(salt) == 29


def test_gen_salt_is_unique_per_call():
    salts = {gen_salt(4) for _ in range(20)}

    assert len(salts) == 20


def test_hash_is_deterministic_for_same_password_and_salt():
    salt = gen_salt(4)

    assert get_password_hash("secret1", salt) == get_password_hash("secret1", salt)


def test_hash_differs_across_salts():
    first = get_password_hash("secret1", gen_salt(4))
    second = get_password_hash("secret1", gen_salt(4))

    assert first != second


def test_hash_does_not_contain_password():
    digest = get_password_hash("secret1", gen_salt(4))

    assert "secret1" not in digest


def test_verify_password_accepts_matching_password():
    salt = gen_salt(4)
    digest = get_password_hash("secret1", salt)

    assert verify_password("secret1", salt, digest) is True


def test_verify_password_rejects_wrong_password():
    salt = gen_salt(4)
    digest = get_password_hash("secret1", salt)

    assert verify_password("wrong", salt, digest) is False


def test_hash_rejects_password_over_bcrypt_limit():
    with pytest.raises(PasswordPolicyError):
        get_password_hash("a" * (MAX_PASSWORD_BYTES + 1), gen_salt(4))


def test_verify_password_treats_oversized_password_as_mismatch():
    salt = gen_salt(4)
    digest = get_password_hash("a" * MAX_PASSWORD_BYTES, salt)

    assert verify_password("a" * (MAX_PASSWORD_BYTES + 1), salt, digest) is False
