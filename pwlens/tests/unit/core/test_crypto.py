"""Test cases for crypto utilities."""

import math

import pytest

from pwlens.core.errors import ValidationError
from pwlens.tests.conftest import PASSWORD_SHA1
from pwlens.utils.crypto import (
    DataHasher,
    RandomStringGenerator,
    generate_random_string,
    hash_data,
)


class TestHashing:
    """Test DataHasher."""

    def test_sha1_reference(self):
        assert hash_data("password", "sha1", uppercase=True) == PASSWORD_SHA1

    def test_lowercase_by_default(self):
        assert hash_data("password", "sha1") == PASSWORD_SHA1.lower()

    def test_unicode_encoded_as_utf8(self):
        assert DataHasher("ü", "sha256").hash_length == 64

    def test_unsupported_algorithm(self):
        with pytest.raises(ValidationError):
            hash_data("x", "md5")

    def test_repr_hides_digest(self):
        hasher = DataHasher("password", "sha1", uppercase=True)

        assert PASSWORD_SHA1 not in repr(hasher)


class TestRandomStrings:
    """Test RandomStringGenerator."""

    def test_length_and_alphabet(self):
        value = generate_random_string(64, "ab")

        assert len(value) == 64
        assert set(value) <= {"a", "b"}

    def test_entropy_bits(self):
        generator = RandomStringGenerator(10, "0123456789")

        assert generator.entropy_bits == pytest.approx(10 * math.log2(10))

    @pytest.mark.parametrize(("length", "alphabet"), [(0, "abc"), (5, "")])
    def test_invalid_parameters(self, length, alphabet):
        with pytest.raises(ValidationError):
            RandomStringGenerator(length, alphabet)
