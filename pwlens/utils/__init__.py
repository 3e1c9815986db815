"""Framework-agnostic utility functions.

- validation: Typed, range-checked conversion of configuration values
- crypto: Hashing and secure random string generation
"""

from pwlens.utils.crypto import (
    DataHasher,
    RandomStringGenerator,
    generate_random_string,
    hash_data,
)
from pwlens.utils.validation import ConfigValidationUtils

__all__ = [
    "ConfigValidationUtils",
    "DataHasher",
    "RandomStringGenerator",
    "generate_random_string",
    "hash_data",
]
