"""Translation service returning plain strings.

Wraps a Resolver and turns its structured outcome into a single string,
either raising on any imperfection (strict mode, for tests and development)
or degrading to readable fallbacks (lenient mode, for production).
"""

from collections.abc import Mapping
from enum import Enum
from typing import Callable, Optional, Protocol

from dotted_i18n.exceptions import (
    InterpolationArgumentsMissingError,
    MissingTranslationError,
    PlaceholderMissingError,
    UndefinedInterpolationError,
)
from dotted_i18n.humanize import humanize_key
from dotted_i18n.logging import get_module_logger
from dotted_i18n.models import ResolutionOutcome
from dotted_i18n.resolver import Resolver

logger = get_module_logger()

Humanizer = Callable[[str], str]


class TranslationMode(str, Enum):
    """How a Translator reacts to imperfect outcomes."""

    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def from_string(cls, mode_str: str) -> "TranslationMode":
        """Convert string to TranslationMode.

        Raises:
            ValueError: If the mode is not supported.
        """
        try:
            return cls(mode_str.strip().lower())
        except ValueError as e:
            raise ValueError(f"Unsupported translation mode: {mode_str}") from e


class SupportsTranslate(Protocol):
    """Anything that can translate a key into a string."""

    def translate(self, key: str, interpolation: Optional[Mapping] = None) -> str: ...


class StrictFormatter:
    """Raise a descriptive I18nError for any imperfect outcome."""

    def format(
        self,
        key: str,
        outcome: ResolutionOutcome,
        interpolation: Optional[Mapping] = None,
    ) -> str:
        """Return the translation or raise.

        Raises:
            MissingTranslationError: No translation string was found.
            UndefinedInterpolationError: A placeholder value was None.
            InterpolationArgumentsMissingError: Placeholders received no value.
            PlaceholderMissingError: Supplied values matched no placeholder.
        """
        paths = outcome.paths
        report = outcome.interpolation

        if not outcome.is_translated:
            logger.error(
                "translation_not_found", key=key, stopped_at=paths.stopped_at
            )
            raise MissingTranslationError(key, paths.stopped_at)

        unused = report.unused_replacements or ()
        used = report.used_placeholders or ()
        for name, value in (interpolation or {}).items():
            if value is None and name in used:
                logger.error("undefined_interpolation", key=key, placeholder=name)
                raise UndefinedInterpolationError(key, name)

        if report.remaining_placeholders:
            logger.error(
                "missing_interpolation_arguments",
                key=key,
                placeholders=list(report.remaining_placeholders),
            )
            raise InterpolationArgumentsMissingError(
                key, report.remaining_placeholders
            )

        if unused:
            logger.error("unused_interpolation_arguments", key=key, arguments=list(unused))
            raise PlaceholderMissingError(key, unused)

        return outcome.translation


class LenientFormatter:
    """Never raise; fall back to a humanized label for missing keys.

    Attributes:
        humanizer: Callable producing a label from the last key segment.
    """

    def __init__(self, humanizer: Optional[Humanizer] = None):
        self.humanizer = humanizer or humanize_key

    def format(
        self,
        key: str,
        outcome: ResolutionOutcome,
        interpolation: Optional[Mapping] = None,
    ) -> str:
        if not outcome.is_translated:
            label = self.humanizer(key.rsplit(".", 1)[-1])
            logger.warning(
                "translation_humanized",
                key=key,
                stopped_at=outcome.paths.stopped_at,
                label=label,
            )
            return label

        if not outcome.interpolation.is_complete:
            logger.info(
                "partial_translation",
                key=key,
                remaining_placeholders=outcome.interpolation.remaining_placeholders,
                unused_replacements=outcome.interpolation.unused_replacements,
            )
        return outcome.translation


class Translator:
    """Translate keys into strings using a Resolver.

    Holds a resolver and a formatting strategy selected by mode. The
    resolver is shared, never copied.

    Usage:
        resolver = Resolver({"greeting": "Hello %{name}"})
        translator = Translator(resolver, mode=TranslationMode.LENIENT)
        translator.translate("greeting", {"name": "Ada"})  # "Hello Ada"

    Attributes:
        resolver: Resolver used for every lookup.
        mode: TranslationMode in effect.
        formatter: Strategy turning outcomes into strings.
        default_translator: Optional translator consulted for keys the
            resolver cannot translate, in either mode.
    """

    def __init__(
        self,
        resolver: Resolver,
        mode: TranslationMode = TranslationMode.STRICT,
        humanizer: Optional[Humanizer] = None,
        default_translator: Optional[SupportsTranslate] = None,
    ):
        self.resolver = resolver
        if isinstance(mode, TranslationMode):
            self.mode = mode
        else:
            self.mode = TranslationMode.from_string(mode)
        self.default_translator = default_translator
        if self.mode is TranslationMode.STRICT:
            self.formatter = StrictFormatter()
        else:
            self.formatter = LenientFormatter(humanizer)

    def resolve(
        self, key: str, interpolation: Optional[Mapping] = None
    ) -> ResolutionOutcome:
        """Return the raw ResolutionOutcome for a key."""
        return self.resolver.resolve(key, interpolation)

    def translate(self, key: str, interpolation: Optional[Mapping] = None) -> str:
        """Translate a key into a string.

        Args:
            key: Dotted key (e.g. "incident.created").
            interpolation: Optional placeholder values.

        Returns:
            Translated and interpolated string.

        Raises:
            I18nError: In strict mode, for any missing translation or
                placeholder mismatch.
        """
        outcome = self.resolver.resolve(key, interpolation)

        if not outcome.is_translated and self.default_translator is not None:
            logger.debug("used_default_translator", key=key)
            return self.default_translator.translate(key, interpolation)

        return self.formatter.format(key, outcome, interpolation)

    def scoped(self, prefix: str) -> Callable[..., str]:
        """Return a translate function with `prefix` prepended to every key.

        Args:
            prefix: Dotted prefix (e.g. "pages.home").

        Returns:
            Callable taking (key, interpolation=None).
        """

        def scoped_translate(key: str, interpolation: Optional[Mapping] = None) -> str:
            return self.translate(f"{prefix}.{key}", interpolation)

        return scoped_translate
