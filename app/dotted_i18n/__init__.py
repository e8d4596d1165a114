"""dotted-i18n - dotted-key translation lookup with structured outcomes.

Main components:
- resolver: Resolver walking nested dictionaries into ResolutionOutcome
- translator: Translator with strict and lenient modes
- models: node variants and outcome dataclasses
- exceptions: errors raised by strict mode
- factory: create_resolver / create_translator wired from settings
"""

from dotted_i18n.exceptions import (
    I18nError,
    InterpolationArgumentsMissingError,
    MissingTranslationError,
    PlaceholderMissingError,
    UndefinedInterpolationError,
)
from dotted_i18n.factory import create_resolver, create_translator
from dotted_i18n.humanize import humanize_key
from dotted_i18n.models import (
    InterpolationReport,
    ResolutionOutcome,
    ResolutionPaths,
    ResolutionStatus,
)
from dotted_i18n.pluralization import default_pluralization_rule
from dotted_i18n.resolver import Resolver
from dotted_i18n.translator import TranslationMode, Translator

__all__ = [
    "Resolver",
    "Translator",
    "TranslationMode",
    "ResolutionOutcome",
    "ResolutionPaths",
    "ResolutionStatus",
    "InterpolationReport",
    "default_pluralization_rule",
    "humanize_key",
    "create_resolver",
    "create_translator",
    "I18nError",
    "MissingTranslationError",
    "InterpolationArgumentsMissingError",
    "UndefinedInterpolationError",
    "PlaceholderMissingError",
]
