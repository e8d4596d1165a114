"""Translation feature settings."""

from typing import Optional

from pydantic import Field, field_validator

from dotted_i18n.configuration.base import FeatureSettings

VALID_MODES = ("strict", "lenient")


class I18nSettings(FeatureSettings):
    """Translation lookup configuration.

    Environment Variables:
        I18N_MODE: "strict" (raise on any imperfection) or "lenient"
            (degrade to readable fallbacks). Unset means strict everywhere
            except production.
        I18N_SCOPE: Dotted prefix applied to every lookup key (e.g. "en").

    Example:
        ```python
        from dotted_i18n.configuration import settings

        if settings.i18n.mode == "lenient":
            ...
        ```
    """

    mode: Optional[str] = Field(default=None, alias="I18N_MODE")
    scope: Optional[str] = Field(default=None, alias="I18N_SCOPE")

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, v: Optional[str]) -> Optional[str]:
        """Lower-case the mode and reject unknown values."""
        if v is None or v == "":
            return None
        value = str(v).strip().lower()
        if value not in VALID_MODES:
            raise ValueError(
                f"I18N_MODE must be one of {', '.join(VALID_MODES)} (got {v!r})"
            )
        return value

    @field_validator("scope", mode="before")
    @classmethod
    def _normalize_scope(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        value = str(v).strip().strip(".")
        return value or None
