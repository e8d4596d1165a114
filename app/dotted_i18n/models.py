"""Translation models for the dotted-i18n resolver.

Defines the dictionary node variants seen during traversal and the
structured outcome returned for every lookup.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    """A translation string, possibly containing %{name} placeholders."""

    text: str


@dataclass(frozen=True)
class Branch:
    """A nested scope of further translation nodes."""

    children: Mapping


@dataclass(frozen=True)
class PluralBranch:
    """A mapping of plural category name to translation string.

    Attributes:
        forms: Category name (e.g. "zero", "one", "other") -> translation.
    """

    forms: Mapping

    def get_form(self, category: str) -> Optional[str]:
        """Return the translation for a category, or None if absent."""
        return self.forms.get(category)


DictionaryNode = Union[Leaf, Branch, PluralBranch]


def classify_node(value: Any) -> Optional[DictionaryNode]:
    """Classify a raw dictionary value into a node variant.

    A non-empty mapping whose values are all strings is a plural mapping
    candidate; any other mapping is a nested scope. A mapping mixing
    strings with other values (e.g. {"one": "x", "other": 5}) is a scope,
    so selecting a plural form from it is a miss. Values that are neither
    strings nor mappings are not translation nodes.

    Args:
        value: Raw value found in the dictionary.

    Returns:
        Leaf, Branch or PluralBranch, or None for unusable values.
    """
    if isinstance(value, str):
        return Leaf(value)
    if isinstance(value, Mapping):
        if value and all(isinstance(v, str) for v in value.values()):
            return PluralBranch(value)
        return Branch(value)
    return None


class ResolutionStatus(Enum):
    """High-level classification of a resolution outcome.

    Attributes:
        TRANSLATED: Translation found with every placeholder accounted for
        PARTIAL: Translation found, but placeholders remain or replacements went unused
        MISSING: No translation found
    """

    TRANSLATED = "translated"
    PARTIAL = "partial"
    MISSING = "missing"


@dataclass(frozen=True)
class ResolutionPaths:
    """Key paths involved in a lookup.

    Attributes:
        original: Key as requested by the caller.
        scoped: Key with the resolver scope applied.
        stopped_at: Deepest dotted prefix of `scoped` matched in the
            dictionary; equals `scoped` when traversal succeeded.
    """

    original: str
    scoped: str
    stopped_at: str

    @property
    def last_segment(self) -> str:
        """Final segment of the requested key."""
        return self.original.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class InterpolationReport:
    """Placeholder accounting for a translation.

    Every field is None when empty, never an empty tuple.

    Attributes:
        remaining_placeholders: Placeholder names left unsubstituted, in
            order of first appearance.
        unused_replacements: Supplied interpolation keys that matched no
            placeholder, in the order they were supplied.
        used_placeholders: Placeholder names that received a supplied
            value, in order of first appearance.
    """

    remaining_placeholders: Optional[Tuple[str, ...]] = None
    unused_replacements: Optional[Tuple[str, ...]] = None
    used_placeholders: Optional[Tuple[str, ...]] = None

    @classmethod
    def build(cls, remaining, unused, used=()) -> "InterpolationReport":
        """Create a report, collapsing empty sequences to None."""
        return cls(
            remaining_placeholders=tuple(remaining) or None,
            unused_replacements=tuple(unused) or None,
            used_placeholders=tuple(used) or None,
        )

    @property
    def is_complete(self) -> bool:
        return not self.remaining_placeholders and not self.unused_replacements


@dataclass(frozen=True)
class ResolutionOutcome:
    """Structured result of resolving a single key.

    Attributes:
        translation: Resolved (and interpolated) string, or None if not found.
        is_translated: True only if a translation string was found and used.
        paths: Key paths involved in the lookup.
        interpolation: Placeholder accounting for the translation.
    """

    translation: Optional[str]
    is_translated: bool
    paths: ResolutionPaths
    interpolation: InterpolationReport = InterpolationReport()

    def __post_init__(self):
        if self.is_translated and self.translation is None:
            raise ValueError("A translated outcome requires a translation string")

    @property
    def status(self) -> ResolutionStatus:
        """Classify the outcome as translated, partial or missing."""
        if not self.is_translated:
            return ResolutionStatus.MISSING
        if self.interpolation.is_complete:
            return ResolutionStatus.TRANSLATED
        return ResolutionStatus.PARTIAL

    @classmethod
    def missing(cls, paths: ResolutionPaths) -> "ResolutionOutcome":
        """Create an outcome for a key with no usable translation."""
        return cls(translation=None, is_translated=False, paths=paths)
