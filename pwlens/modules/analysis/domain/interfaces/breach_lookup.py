"""
Breach Lookup Interface

Port for a k-anonymity range query against a breached-password corpus.
"""

from abc import ABC, abstractmethod


class IBreachLookup(ABC):
    """Port for range lookups keyed by a digest prefix."""

    @abstractmethod
    async def lookup(self, prefix: str) -> dict[str, int]:
        """
        Fetch every known digest suffix sharing a prefix.

        Args:
            prefix: First five upper-case hex characters of the SHA-1 digest

        Returns:
            Mapping of upper-case suffix to breach count

        Raises:
            ExternalServiceError: If the lookup fails or the body is malformed
        """
        ...

    async def close(self) -> None:
        """Release any held resources."""
