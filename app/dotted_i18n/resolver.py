"""Resolution engine for dotted translation keys.

Walks a nested translation dictionary, selects plural forms, interpolates
placeholders and reports the result as a ResolutionOutcome. The resolver
never raises for missing keys or malformed dictionaries; every failure is
represented in the outcome.
"""

from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Protocol, Tuple

from dotted_i18n.interpolation import interpolate
from dotted_i18n.logging import get_module_logger
from dotted_i18n.models import (
    DictionaryNode,
    Leaf,
    PluralBranch,
    ResolutionOutcome,
    ResolutionPaths,
    classify_node,
)
from dotted_i18n.pluralization import (
    PluralizationRule,
    default_pluralization_rule,
    select_plural_form,
)

logger = get_module_logger()

COUNT_KEY = "count"


class SupportsResolve(Protocol):
    """Anything that can resolve a key into a ResolutionOutcome."""

    def resolve(
        self, key: str, interpolation: Optional[Mapping] = None
    ) -> ResolutionOutcome: ...


class Resolver:
    """Resolve dotted keys against a translation dictionary.

    Configuration is fixed at construction. The dictionary and fallback are
    borrowed references: they are never copied or modified, so one
    dictionary can back any number of resolvers.

    Attributes:
        dictionary: Nested translation mapping.
        scope: Optional dotted prefix applied to every key.
        fallback: Optional resolver consulted when the dictionary has no
            translation for a key.
        pluralization_rule: Callable mapping a count to a plural category.
    """

    def __init__(
        self,
        dictionary: Mapping,
        scope: Optional[str] = None,
        fallback: Optional[SupportsResolve] = None,
        pluralization_rule: Optional[PluralizationRule] = None,
    ):
        self.dictionary = dictionary
        self.scope = scope or None
        self.fallback = fallback
        self.pluralization_rule = pluralization_rule or default_pluralization_rule

    def scoped_key(self, key: str) -> str:
        """Apply the configured scope to a key."""
        if self.scope:
            return f"{self.scope}.{key}"
        return key

    def resolve(
        self, key: str, interpolation: Optional[Mapping] = None
    ) -> ResolutionOutcome:
        """Resolve a key into a structured outcome.

        Args:
            key: Dotted key relative to the scope (e.g. "errors.not_found").
            interpolation: Optional placeholder values. A "count" entry
                selects a plural form when the key points at a plural mapping.

        Returns:
            ResolutionOutcome describing the translation, paths and
            placeholder accounting. When the dictionary has no translation
            and a fallback is configured, the fallback's outcome is returned
            unchanged.
        """
        scoped = self.scoped_key(key)
        node, stopped_at = self._traverse(scoped)
        paths = ResolutionPaths(original=key, scoped=scoped, stopped_at=stopped_at)

        candidate, pluralized = self._select_translation(node, interpolation)

        if candidate is None:
            if self.fallback is not None:
                logger.debug("translation_delegated", key=key, scoped_key=scoped)
                return self.fallback.resolve(key, interpolation)

            logger.debug(
                "translation_missing", key=key, scoped_key=scoped, stopped_at=stopped_at
            )
            return ResolutionOutcome.missing(paths)

        ignored = (COUNT_KEY,) if pluralized else ()
        translation, report = interpolate(candidate, interpolation, ignored)

        return ResolutionOutcome(
            translation=translation,
            is_translated=True,
            paths=paths,
            interpolation=report,
        )

    def scoped(self, prefix: str) -> Callable[..., ResolutionOutcome]:
        """Return a resolve function with `prefix` prepended to every key.

        Args:
            prefix: Dotted prefix (e.g. "pages.home").

        Returns:
            Callable taking (key, interpolation=None).
        """

        def scoped_resolve(
            key: str, interpolation: Optional[Mapping] = None
        ) -> ResolutionOutcome:
            return self.resolve(f"{prefix}.{key}", interpolation)

        return scoped_resolve

    def _traverse(self, scoped: str) -> Tuple[Optional[DictionaryNode], str]:
        """Descend the dictionary along the segments of `scoped`.

        Returns:
            Tuple of (node reached or None on a miss, dotted prefix of the
            segments that matched).
        """
        if not scoped:
            return None, ""

        current: Any = self.dictionary
        matched: List[str] = []

        for segment in scoped.split("."):
            if not isinstance(current, Mapping) or segment not in current:
                return None, ".".join(matched)
            current = current[segment]
            matched.append(segment)

        return classify_node(current), ".".join(matched)

    def _select_translation(
        self, node: Optional[DictionaryNode], interpolation: Optional[Mapping]
    ) -> Tuple[Optional[str], bool]:
        """Pick the candidate translation for a traversed node.

        Returns:
            Tuple of (candidate string or None, whether pluralization chose it).
        """
        if isinstance(node, Leaf):
            return node.text, False

        if isinstance(node, PluralBranch) and interpolation is not None:
            if COUNT_KEY in interpolation:
                form = select_plural_form(
                    node, interpolation[COUNT_KEY], self.pluralization_rule
                )
                return form, form is not None

        return None, False
