"""Tests for password hashing helpers."""

from cadastro.core.security import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("segredo")
        assert hashed != "segredo"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("segredo") != hash_password("segredo")

    def test_verify_matches_plaintext(self):
        hashed = hash_password("segredo")
        assert verify_password("segredo", hashed) is True

    def test_verify_rejects_wrong_password(self):
        hashed = hash_password("segredo")
        assert verify_password("outra-coisa", hashed) is False

    def test_verify_malformed_hash_returns_false(self):
        assert verify_password("segredo", "nao-e-um-hash") is False

    def test_verify_empty_values_return_false(self):
        assert verify_password("", hash_password("segredo")) is False
        assert verify_password("segredo", "") is False
