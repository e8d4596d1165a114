"""Plural form selection.

A pluralization rule maps a count to a category name. Categories are
looked up literally in a plural mapping, except that a missing "zero"
form falls back to "other".
"""

from typing import Any, Callable, Optional

from dotted_i18n.models import PluralBranch

ZERO = "zero"
ONE = "one"
OTHER = "other"

PluralizationRule = Callable[[Any], str]


def default_pluralization_rule(count: Any) -> str:
    """Classify a count into "zero", "one" or "other".

    Args:
        count: Value supplied as the "count" interpolation argument.

    Returns:
        Plural category name.
    """
    if count == 0:
        return ZERO
    if count == 1:
        return ONE
    return OTHER


def select_plural_form(
    node: PluralBranch, count: Any, rule: PluralizationRule
) -> Optional[str]:
    """Pick the translation for `count` from a plural mapping.

    The rule is called exactly once. A "zero" category with no "zero" form
    uses the "other" form; every other category must exist verbatim.

    Args:
        node: Plural mapping to select from.
        count: Count to classify.
        rule: Pluralization rule.

    Returns:
        Selected translation string, or None if the category has no form.
    """
    category = rule(count)
    form = node.get_form(category)
    if form is None and category == ZERO:
        form = node.get_form(OTHER)
    return form
