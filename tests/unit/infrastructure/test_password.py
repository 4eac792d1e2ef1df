from __future__ import annotations

from agromano.infrastructure.auth.password import PasswordHasher


def test_hash_uses_cost_ten_and_verifies():
    hasher = PasswordHasher()
    hashed = hasher.hash("secreto123")
    assert hashed.split("$")[2] == "10"
    assert hasher.verify("secreto123", hashed)
    assert not hasher.verify("otra", hashed)


def test_accepts_2a_prefixed_hashes():
    hasher = PasswordHasher(rounds=4)
    hashed = hasher.hash("secreto123").replace("$2b$", "$2a$", 1)
    assert hasher.verify("secreto123", hashed)


def test_non_bcrypt_value_never_matches():
    hasher = PasswordHasher()
    assert not hasher.verify("texto-plano", "texto-plano")
    assert not hasher.verify("x", "")
