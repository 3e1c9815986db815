"""
Breach Check Service

Checks whether a password appears in a breached-password corpus through a
k-anonymity range lookup.

Checks are user-triggered and may overlap. Every request is tagged with a
sequence number; when a result arrives after a newer request was started (or
after ``invalidate()``), it is discarded instead of replacing the latest one.
The lookup protocol has no server-side cancellation, so in-flight requests are
left to finish and their results dropped.
"""

from pwlens.core.config import BreachCheckConfig
from pwlens.core.errors import ExternalServiceError, ValidationError
from pwlens.core.logging import get_logger
from pwlens.modules.analysis.domain.interfaces.breach_lookup import IBreachLookup
from pwlens.modules.analysis.domain.value_objects.breach_check_result import (
    BreachCheckResult,
)
from pwlens.utils.crypto import hash_data

logger = get_logger(__name__)

PREFIX_LENGTH = 5


class BreachCheckService:
    """Latest-request-wins breach checker."""

    def __init__(
        self,
        lookup: IBreachLookup | None = None,
        config: BreachCheckConfig | None = None,
    ):
        self.config = config or BreachCheckConfig()

        if lookup is None:
            from pwlens.modules.analysis.infrastructure.adapters.pwned_passwords_adapter import (  # noqa: E501
                PwnedPasswordsAdapter,
            )

            lookup = PwnedPasswordsAdapter(self.config)

        self._lookup = lookup
        self._sequence = 0
        self.latest_result: BreachCheckResult | None = None

    @property
    def current_sequence(self) -> int:
        return self._sequence

    def invalidate(self) -> None:
        """Abandon any in-flight check, e.g. when the password changes."""
        self._sequence += 1
        self.latest_result = None

    @staticmethod
    def split_digest(password: str) -> tuple[str, str]:
        """Return the (prefix, suffix) of the upper-case SHA-1 hex digest."""
        digest = hash_data(password, "sha1", uppercase=True)
        return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]

    async def check(self, password: str) -> BreachCheckResult | None:
        """
        Check a password against the breach corpus.

        Args:
            password: Password to check

        Returns:
            The result, or None if a newer check superseded this one

        Raises:
            ValidationError: If the password is shorter than the configured minimum
        """
        if len(password) < self.config.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.config.min_password_length} "
                "characters to check",
                field="password",
            )

        self._sequence += 1
        request_id = self._sequence
        prefix, suffix = self.split_digest(password)

        try:
            suffixes = await self._lookup.lookup(prefix)
        except ExternalServiceError as e:
            result = BreachCheckResult.failed(e.message)
        else:
            count = suffixes.get(suffix, 0)
            result = (
                BreachCheckResult.breached(count)
                if count
                else BreachCheckResult.not_found()
            )

        if request_id != self._sequence:
            logger.debug(
                "Discarding stale breach check",
                request_id=request_id,
                latest_request_id=self._sequence,
            )
            return None

        self.latest_result = result
        logger.info(
            "Breach check completed",
            request_id=request_id,
            status=result.status.value,
        )
        return result

    async def close(self) -> None:
        await self._lookup.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
