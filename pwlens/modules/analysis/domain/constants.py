"""
Reference tables for password analysis.

Static, read-only data built once at import time. Nothing in the package
mutates these tables.
"""

import string

# Character pool sizes for the charset-pool entropy model
LOWERCASE_POOL_SIZE = 26
UPPERCASE_POOL_SIZE = 26
DIGIT_POOL_SIZE = 10
SYMBOL_POOL_SIZE = 33

UPPERCASE_CHARS = frozenset(string.ascii_uppercase)
LOWERCASE_CHARS = frozenset(string.ascii_lowercase)
DIGIT_CHARS = frozenset(string.digits)

ALPHABET = string.ascii_lowercase
DIGITS = string.digits

KEYBOARD_ROWS: tuple[str, ...] = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

KEYBOARD_SEQUENCES: tuple[str, ...] = KEYBOARD_ROWS + tuple(
    row[::-1] for row in KEYBOARD_ROWS
)

SEQUENCES: tuple[str, ...] = (
    ALPHABET,
    ALPHABET[::-1],
    DIGITS,
    DIGITS[::-1],
) + KEYBOARD_SEQUENCES

PATTERN_WINDOW = 3
MIN_REPEAT_RUN = 3

# Substrings of the most common breached passwords
COMMON_PASSWORD_SUBSTRINGS: tuple[str, ...] = (
    "password",
    "welcome",
    "admin",
    "letmein",
    "qwerty",
    "iloveyou",
    "monkey",
    "dragon",
    "master",
    "sunshine",
    "princess",
    "football",
    "baseball",
    "shadow",
    "login",
    "abc123",
    "123456",
    "trustno1",
)

# Frequent 2- and 3-character substrings in leaked-password corpora
COMMON_BIGRAMS = frozenset(
    {
        "12", "23", "34", "45", "56", "67", "78", "89", "90", "01",
        "00", "11", "22", "99", "ab", "bc", "cd", "an", "ar", "as",
        "ch", "el", "en", "er", "es", "ey", "he", "il", "in", "le",
        "lo", "ma", "nd", "ng", "on", "ov", "ra", "re", "ss", "st",
        "te", "th", "ve", "!!", "aa",
    }
)

COMMON_TRIGRAMS = frozenset(
    {
        "123", "234", "345", "456", "567", "678", "789", "890", "000", "111",
        "abc", "bcd", "cde", "xyz", "the", "and", "ing", "ion", "ter", "ent",
        "pas", "ass", "ssw", "swo", "wor", "ord", "lov", "ove", "you", "qwe",
        "wer", "ert", "asd", "sdf", "zxc", "adm", "dmi", "min", "let", "man",
        "ste", "mon", "key", "dra", "ago", "gon", "!!!",
    }
)

BIGRAM_WEIGHT = 1.0
TRIGRAM_WEIGHT = 1.5

EMPTY_PASSWORD_FEEDBACK = "Enter a password to see its analysis"
EMPTY_CRACK_TIME = "instant"
NOT_AVAILABLE = "N/A"

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400
SECONDS_PER_YEAR = 31_536_000
SCIENTIFIC_YEARS_THRESHOLD = 1_000_000
