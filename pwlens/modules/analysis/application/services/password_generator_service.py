"""
Password Generator Service

Generates random passwords from the enabled character classes and grades
them with the analysis engine.
"""

from pwlens.core.config import GeneratorConfig
from pwlens.core.errors import ValidationError
from pwlens.core.logging import get_logger
from pwlens.modules.analysis.domain.services.password_analyzer import (
    PasswordAnalyzer,
    get_default_analyzer,
)
from pwlens.modules.analysis.domain.value_objects.generated_password import (
    GeneratedPassword,
    UsageRecommendation,
)
from pwlens.utils.crypto import generate_random_string

logger = get_logger(__name__)

USAGE_TIERS: tuple[tuple[int, UsageRecommendation], ...] = (
    (
        4,
        UsageRecommendation(
            title="Extremely Strong - Critical Applications",
            applications=(
                "Banking & Financial Services",
                "Corporate Email & Work Systems",
                "Password Managers Master Password",
                "Cryptocurrency Wallets",
                "Medical Records & Healthcare Systems",
            ),
        ),
    ),
    (
        3,
        UsageRecommendation(
            title="Strong - Sensitive Applications",
            applications=(
                "Personal Email Accounts",
                "Social Media Accounts",
                "E-commerce & Shopping Sites",
                "Cloud Storage Services",
                "Government Portals",
            ),
        ),
    ),
    (
        2,
        UsageRecommendation(
            title="Moderate - General Use",
            applications=(
                "Forum Accounts",
                "Gaming Platforms",
                "Newsletter Subscriptions",
                "Basic Web Services",
                "Mobile Apps (non-sensitive)",
            ),
        ),
    ),
)

NOT_RECOMMENDED = UsageRecommendation(
    title="Weak - Not Recommended",
    applications=(
        "Test Accounts Only",
        "Temporary Access",
        "Local Development Environment",
    ),
)


def recommend_usage(score: int) -> UsageRecommendation:
    """Pick the usage tier for a score."""
    for minimum_score, recommendation in USAGE_TIERS:
        if score >= minimum_score:
            return recommendation
    return NOT_RECOMMENDED


class PasswordGeneratorService:
    """Generates and grades random passwords."""

    def __init__(
        self,
        analyzer: PasswordAnalyzer | None = None,
        config: GeneratorConfig | None = None,
    ):
        self._analyzer = analyzer
        self.config = config or GeneratorConfig()

    @property
    def analyzer(self) -> PasswordAnalyzer:
        if self._analyzer is None:
            self._analyzer = get_default_analyzer()
        return self._analyzer

    def build_alphabet(
        self,
        uppercase: bool = True,
        lowercase: bool = True,
        numbers: bool = True,
        symbols: bool = True,
    ) -> str:
        """
        Concatenate the alphabets of the enabled classes.

        Raises:
            ValidationError: If no class is enabled
        """
        alphabet = "".join(
            chars
            for enabled, chars in (
                (uppercase, self.config.uppercase_chars),
                (lowercase, self.config.lowercase_chars),
                (numbers, self.config.number_chars),
                (symbols, self.config.symbol_chars),
            )
            if enabled
        )

        if not alphabet:
            raise ValidationError(
                "Please select at least one character type", field="character_types"
            )

        return alphabet

    def generate_password(
        self,
        length: int | None = None,
        uppercase: bool = True,
        lowercase: bool = True,
        numbers: bool = True,
        symbols: bool = True,
    ) -> str:
        """
        Generate a random password.

        Each character is drawn independently and uniformly from the union of
        the enabled classes using ``secrets``.

        Raises:
            ValidationError: If no class is enabled or the length is out of bounds
        """
        if length is None:
            length = self.config.default_length

        if not self.config.min_length <= length <= self.config.max_length:
            raise ValidationError(
                f"Length must be between {self.config.min_length} and "
                f"{self.config.max_length}",
                field="length",
            )

        alphabet = self.build_alphabet(uppercase, lowercase, numbers, symbols)
        return generate_random_string(length, alphabet)

    def generate(
        self,
        length: int | None = None,
        uppercase: bool = True,
        lowercase: bool = True,
        numbers: bool = True,
        symbols: bool = True,
    ) -> GeneratedPassword:
        """Generate a password and grade it."""
        password = self.generate_password(length, uppercase, lowercase, numbers, symbols)
        analysis = self.analyzer.analyze(password)

        logger.info(
            "Password generated", length=len(password), score=analysis.score
        )

        return GeneratedPassword(
            password=password,
            analysis=analysis,
            usage=recommend_usage(analysis.score),
        )
