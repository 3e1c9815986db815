"""Analysis infrastructure adapters."""

from .pwned_passwords_adapter import PwnedPasswordsAdapter
from .zxcvbn_baseline_adapter import ZxcvbnBaselineAdapter

__all__ = ["PwnedPasswordsAdapter", "ZxcvbnBaselineAdapter"]
