from modules.auth.passwords import hash_password, verify_password


class TestPasswords:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("hunter2", rounds=4)
        assert hashed != "hunter2"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("hunter2", rounds=4) != hash_password("hunter2", rounds=4)

    def test_cost_factor_is_embedded(self):
        assert hash_password("hunter2", rounds=5).split("$")[2] == "05"

    def test_verify_matches(self):
        hashed = hash_password("hunter2", rounds=4)
        assert verify_password("hunter2", hashed) is True

    def test_verify_rejects_wrong_password(self):
        hashed = hash_password("hunter2", rounds=4)
        assert verify_password("hunter3", hashed) is False

    def test_verify_malformed_hash(self):
        assert verify_password("hunter2", "not-a-bcrypt-hash") is False


class TestLongPasswords:
    """bcrypt reads at most 72 bytes; longer passwords are cut, not rejected."""

    def test_multibyte_password_over_limit(self):
        password = "密" * 25  # 75 bytes in UTF-8
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed) is True

    def test_long_ascii_passphrase(self):
        password = "correct horse battery staple " * 4
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed) is True
        assert verify_password("wrong" + password, hashed) is False

    def test_only_first_72_bytes_count(self):
        hashed = hash_password("a" * 72 + "tail", rounds=4)
        assert verify_password("a" * 72 + "other", hashed) is True
