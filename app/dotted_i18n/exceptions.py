"""Exceptions raised by the strict translation mode.

The resolver itself never raises; these errors are produced when a strict
Translator turns an imperfect ResolutionOutcome into a failure.
"""

from typing import Optional, Sequence


class I18nError(Exception):
    """Base exception for all translation errors.

    Example:
        try:
            translator.translate("errors.not_found")
        except I18nError as e:
            logger.error("translation_error", error=str(e))
    """

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key


class MissingTranslationError(I18nError):
    """Raised when no translation string exists for a key.

    Example:
        >>> translator.translate("foo.bar")
        Traceback (most recent call last):
        ...
        MissingTranslationError: Translation missing: foo.bar (stopped at 'foo')
    """

    def __init__(self, key: str, stopped_at: Optional[str] = None):
        self.stopped_at = stopped_at or ""
        super().__init__(
            f"Translation missing: {key} (stopped at '{self.stopped_at}')", key
        )


class InterpolationArgumentsMissingError(I18nError):
    """Raised when placeholders in a translation received no value.

    Example:
        >>> translator.translate("greeting")
        Traceback (most recent call last):
        ...
        InterpolationArgumentsMissingError: Interpolation arguments missing: name,count (key: greeting)
    """

    def __init__(self, key: str, placeholders: Sequence[str]):
        self.placeholders = tuple(placeholders)
        super().__init__(
            f"Interpolation arguments missing: {','.join(self.placeholders)} "
            f"(key: {key})",
            key,
        )


class UndefinedInterpolationError(I18nError):
    """Raised when a placeholder value was supplied as None."""

    def __init__(self, key: str, placeholder: str):
        self.placeholder = placeholder
        super().__init__(
            f"Got undefined interpolation value for placeholder '{placeholder}' "
            f"(key: {key})",
            key,
        )


class PlaceholderMissingError(I18nError):
    """Raised when interpolation values were supplied for placeholders the
    translation does not contain."""

    def __init__(self, key: str, placeholders: Sequence[str]):
        self.placeholders = tuple(placeholders)
        super().__init__(
            f"Placeholder missing for interpolation arguments: "
            f"{','.join(self.placeholders)} (key: {key})",
            key,
        )
