"""Factory functions for creating resolvers and translators.

Explicit arguments always win; anything left unset is read from the
application settings (I18N_MODE, I18N_SCOPE, ENVIRONMENT).
"""

from collections.abc import Mapping
from typing import Optional, Union

from dotted_i18n.configuration import Settings
from dotted_i18n.humanize import humanize_key
from dotted_i18n.logging import get_module_logger
from dotted_i18n.pluralization import PluralizationRule
from dotted_i18n.resolver import Resolver, SupportsResolve
from dotted_i18n.translator import (
    Humanizer,
    SupportsTranslate,
    TranslationMode,
    Translator,
)

logger = get_module_logger()


def _get_settings(settings: Optional[Settings]) -> Settings:
    if settings is not None:
        return settings
    from dotted_i18n.configuration import settings as default_settings

    return default_settings


def resolve_mode(
    mode: Union[TranslationMode, str, None] = None,
    settings: Optional[Settings] = None,
) -> TranslationMode:
    """Pick the translation mode.

    Order: explicit `mode`, then I18N_MODE, then lenient in production and
    strict everywhere else.

    Args:
        mode: Explicit mode, as enum or string.
        settings: Settings to consult (default: module singleton).

    Returns:
        Effective TranslationMode.
    """
    if mode is not None:
        if isinstance(mode, TranslationMode):
            return mode
        return TranslationMode.from_string(mode)

    settings = _get_settings(settings)
    if settings.i18n.mode:
        return TranslationMode.from_string(settings.i18n.mode)
    if settings.is_production:
        return TranslationMode.LENIENT
    return TranslationMode.STRICT


def create_resolver(
    dictionary: Mapping,
    scope: Optional[str] = None,
    fallback: Optional[SupportsResolve] = None,
    pluralization_rule: Optional[PluralizationRule] = None,
    settings: Optional[Settings] = None,
) -> Resolver:
    """Create a Resolver, taking the scope from settings when not given.

    Args:
        dictionary: Nested translation mapping (shared, not copied).
        scope: Dotted prefix for every key (default: I18N_SCOPE).
        fallback: Resolver consulted for keys missing from `dictionary`.
        pluralization_rule: Count classifier (default: zero/one/other).
        settings: Settings to consult (default: module singleton).

    Returns:
        Resolver: Configured resolver instance
    """
    if scope is None:
        scope = _get_settings(settings).i18n.scope

    resolver = Resolver(
        dictionary,
        scope=scope,
        fallback=fallback,
        pluralization_rule=pluralization_rule,
    )
    logger.info(
        "resolver_created",
        scope=scope,
        has_fallback=fallback is not None,
        custom_pluralization=pluralization_rule is not None,
    )
    return resolver


def create_translator(
    dictionary: Mapping,
    mode: Union[TranslationMode, str, None] = None,
    scope: Optional[str] = None,
    fallback: Optional[SupportsResolve] = None,
    pluralization_rule: Optional[PluralizationRule] = None,
    humanizer: Optional[Humanizer] = None,
    default_translator: Optional[SupportsTranslate] = None,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        dictionary: Nested translation mapping (shared, not copied).
        mode: "strict" or "lenient" (default: see resolve_mode).
        scope: Dotted prefix for every key (default: I18N_SCOPE).
        fallback: Resolver consulted for keys missing from `dictionary`.
        pluralization_rule: Count classifier (default: zero/one/other).
        humanizer: Label builder for missing keys in lenient mode.
        default_translator: Translator used for keys nothing could resolve.
        settings: Settings to consult (default: module singleton).

    Returns:
        Translator: Configured translator instance

    Usage:
        # Mode and scope from the environment
        translator = create_translator({"en": {"hello": "Hello"}})

        # Explicit configuration
        translator = create_translator(messages, mode="lenient", scope="en")
    """
    settings = _get_settings(settings)
    effective_mode = resolve_mode(mode, settings)
    resolver = create_resolver(
        dictionary,
        scope=scope,
        fallback=fallback,
        pluralization_rule=pluralization_rule,
        settings=settings,
    )
    translator = Translator(
        resolver,
        mode=effective_mode,
        humanizer=humanizer or humanize_key,
        default_translator=default_translator,
    )
    logger.info("translator_created", mode=effective_mode.value, scope=resolver.scope)
    return translator
