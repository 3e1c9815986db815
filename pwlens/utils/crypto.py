"""Cryptography utilities.

Framework-agnostic helpers for hashing and secure random string generation.
Random values always come from the ``secrets`` module, never from ``random``.
"""

import hashlib
import math
import secrets

from pwlens.core.errors import ValidationError


class RandomStringGenerator:
    """Cryptographically secure random string drawn uniformly from an alphabet."""

    def __init__(self, length: int, alphabet: str):
        """
        Initialize and generate random string.

        Args:
            length: Length of string to generate
            alphabet: Characters to draw from

        Raises:
            ValidationError: If parameters are invalid
        """
        if length < 1:
            raise ValidationError("Length must be positive", field="length")

        if not alphabet:
            raise ValidationError("Alphabet must not be empty", field="alphabet")

        self.length = length
        self.alphabet = alphabet
        self.value = "".join(secrets.choice(alphabet) for _ in range(length))

    @property
    def entropy_bits(self) -> float:
        """Entropy of the generation process in bits."""
        return self.length * math.log2(len(set(self.alphabet)))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"RandomStringGenerator(length={self.length})"


class DataHasher:
    """Hex digest of UTF-8 encoded text."""

    SUPPORTED_ALGORITHMS = frozenset({"sha1", "sha256", "sha512"})

    def __init__(self, data: str, algorithm: str = "sha256", uppercase: bool = False):
        """
        Initialize and compute hash.

        Args:
            data: Text to hash
            algorithm: Hashing algorithm name
            uppercase: Return upper-case hex

        Raises:
            ValidationError: If the algorithm is not supported
        """
        if algorithm not in self.SUPPORTED_ALGORITHMS:
            raise ValidationError(
                f"Unsupported hash algorithm: {algorithm}", field="algorithm"
            )

        self.algorithm = algorithm
        digest = hashlib.new(algorithm, data.encode("utf-8")).hexdigest()
        self.value = digest.upper() if uppercase else digest

    @property
    def hash_length(self) -> int:
        """Length of the hex digest in characters."""
        return len(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        # Digest omitted
        return f"DataHasher(algorithm={self.algorithm!r})"


def generate_random_string(length: int, alphabet: str) -> str:
    """Generate cryptographically secure random string."""
    return RandomStringGenerator(length, alphabet).value


def hash_data(data: str, algorithm: str = "sha256", uppercase: bool = False) -> str:
    """Hash data using specified algorithm."""
    return DataHasher(data, algorithm, uppercase).value


__all__ = [
    "DataHasher",
    "RandomStringGenerator",
    "generate_random_string",
    "hash_data",
]
