"""Unit tests for the pure credential input policies."""

from __future__ import annotations

import pytest

from identity_registry.services._shared.policies.credentials import (
    is_blank,
    is_valid_email,
    is_valid_password,
    is_valid_username,
    normalize,
)


class TestNormalize:
    def test_trims_and_collapses_whitespace(self):
        assert normalize("  john \t  doe \n") == "john doe"

    def test_email_mode_lowercases(self):
        assert normalize("  John.Doe@Example.COM ", True) == "john.doe@example.com"

    def test_non_email_mode_keeps_case(self):
        assert normalize(" MixedCase ") == "MixedCase"

    @pytest.mark.parametrize("value", [None, 42, ["a"], {"a": 1}])
    def test_non_string_passthrough(self, value):
        assert normalize(value) is value
        assert normalize(value, True) is value


class TestEmail:
    @pytest.mark.parametrize(
        "email",
        [
            "user@example.com",
            "first.last+tag@sub.example.co",
            "a_b%c-d@my-domain.io",
        ],
    )
    def test_accepts_well_formed(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "",
            None,
            123,
            "not-an-email",
            "@example.com",
            "user@",
            "user@localhost",
            "user..name@example.com",
            "user@example..com",
            "user@example.c",
            "user@exa mple.com",
            "user@@example.com",
            "a@b@example.com",
        ],
    )
    def test_rejects_malformed(self, email):
        assert is_valid_email(email) is False

    def test_length_limits(self):
        domain = "example.com"
        local_64 = "a" * 64
        assert is_valid_email(f"{local_64}@{domain}") is True
        assert is_valid_email(f"{'a' * 65}@{domain}") is False

        # 254 total is allowed, 255 is not
        long_domain = ".".join(["b" * 60] * 3) + "." + "c" * 7
        assert len(long_domain) == 190
        fits = "a" * (254 - 1 - len(long_domain)) + "@" + long_domain
        assert len(fits) == 254
        assert is_valid_email(fits) is True
        assert is_valid_email("a" + fits) is False


class TestUsername:
    @pytest.mark.parametrize("username", ["abc", "user_1", "A" * 20, "___"])
    def test_accepts(self, username):
        assert is_valid_username(username) is True

    @pytest.mark.parametrize(
        "username",
        ["ab", "A" * 21, "john doe", "john-doe", "john.doe", "jöhn", "", None, 12345],
    )
    def test_rejects(self, username):
        assert is_valid_username(username) is False


class TestPassword:
    @pytest.mark.parametrize(
        "password",
        ["Password@123", "Aa1@aaaa", "Zz9&" * 10, "TestPassword@123"],
    )
    def test_accepts(self, password):
        assert is_valid_password(password) is True

    @pytest.mark.parametrize(
        "password",
        [
            "password123",  # no uppercase, no special
            "12345",  # too short
            "Aa1@aaa",  # 7 chars
            "PASSWORD@123",  # no lowercase
            "Password@abc",  # no digit
            "Password123",  # no special
            "Pass word@123",  # space not allowed
            "Password#123",  # '#' outside the special set
            "Pässword@123",  # non-ASCII letter
            "Password@１23",  # full-width digit
            None,
        ],
    )
    def test_rejects(self, password):
        assert is_valid_password(password) is False

    def test_no_upper_bound(self):
        assert is_valid_password("Aa1@" + "x" * 500) is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, True), ("", True), ("   ", True), ("x", False), (0, False)],
)
def test_is_blank(value, expected):
    assert is_blank(value) is expected
