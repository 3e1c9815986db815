"""
Pwned Passwords Range Adapter

k-anonymity client for the Pwned Passwords range API. Only the five-character
digest prefix is ever sent; matching against the returned suffixes happens
locally.
"""

import re

import httpx

from pwlens.core.config import BreachCheckConfig
from pwlens.core.errors import ExternalServiceError, ValidationError
from pwlens.core.logging import get_logger
from pwlens.modules.analysis.domain.interfaces.breach_lookup import IBreachLookup

logger = get_logger(__name__)

SERVICE_NAME = "pwned_passwords"
PREFIX_PATTERN = re.compile(r"^[0-9A-F]{5}$")
SUFFIX_PATTERN = re.compile(r"^[0-9A-F]{35}$")


class PwnedPasswordsAdapter(IBreachLookup):
    """Range lookup client using httpx."""

    def __init__(
        self,
        config: BreachCheckConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize adapter.

        Args:
            config: Endpoint, timeouts and padding settings
            client: Pre-built client; the adapter only closes clients it creates
        """
        self.config = config or BreachCheckConfig()
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get HTTP client."""
        if self._client is None:
            timeout = httpx.Timeout(
                self.config.read_timeout, connect=self.config.connect_timeout
            )
            self._client = httpx.AsyncClient(
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "text/plain",
                },
                timeout=timeout,
            )
        return self._client

    def _range_url(self, prefix: str) -> str:
        return f"{self.config.api_url}/range/{prefix}"

    async def lookup(self, prefix: str) -> dict[str, int]:
        """
        Fetch suffix counts for a digest prefix.

        Padding entries (count 0) are dropped.

        Raises:
            ValidationError: If the prefix is not five upper-case hex characters
            ExternalServiceError: On network errors, non-2xx responses or a
                malformed body
        """
        if not PREFIX_PATTERN.match(prefix):
            raise ValidationError(
                "Prefix must be five upper-case hex characters", field="prefix"
            )

        headers = {"Add-Padding": "true"} if self.config.add_padding else {}

        try:
            response = await self._get_client().get(
                self._range_url(prefix), headers=headers
            )
        except httpx.HTTPError as e:
            logger.warning("Breach lookup request failed", error_type=type(e).__name__)
            raise ExternalServiceError(
                SERVICE_NAME, f"Request failed: {type(e).__name__}", cause=e
            ) from e

        if not response.is_success:
            logger.warning("Breach lookup rejected", status_code=response.status_code)
            raise ExternalServiceError(
                SERVICE_NAME,
                f"Unexpected status {response.status_code}",
                service_status_code=response.status_code,
            )

        suffixes = self._parse_body(response.text)
        logger.debug("Breach lookup completed", prefix=prefix, entries=len(suffixes))
        return suffixes

    @staticmethod
    def _parse_body(body: str) -> dict[str, int]:
        """Parse ``SUFFIX:COUNT`` lines into a mapping."""
        suffixes: dict[str, int] = {}

        for line_number, raw_line in enumerate(body.splitlines(), start=1):
            line = raw_line.strip()
            if not line:
                continue

            suffix, separator, count_text = line.partition(":")
            suffix = suffix.strip().upper()
            if not separator or not SUFFIX_PATTERN.match(suffix):
                raise ExternalServiceError(
                    SERVICE_NAME, f"Malformed response line {line_number}"
                )

            try:
                count = int(count_text.strip())
            except ValueError as e:
                raise ExternalServiceError(
                    SERVICE_NAME, f"Malformed count on line {line_number}", cause=e
                ) from e

            if count < 0:
                raise ExternalServiceError(
                    SERVICE_NAME, f"Negative count on line {line_number}"
                )

            if count > 0:
                suffixes[suffix] = count

        return suffixes

    async def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
