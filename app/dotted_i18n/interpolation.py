"""Placeholder interpolation with accounting.

Placeholders use the %{name} syntax. Unknown placeholders are left in the
output verbatim and reported instead of raising.
"""

import re
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from dotted_i18n.models import InterpolationReport

PLACEHOLDER_PATTERN = re.compile(r"%\{([^{}]+)\}")


def find_placeholders(message: str) -> List[str]:
    """List placeholder names in order of first appearance, de-duplicated.

    Args:
        message: Translation string with %{name} placeholders.

    Returns:
        Unique placeholder names.
    """
    names: List[str] = []
    for name in PLACEHOLDER_PATTERN.findall(message):
        if name not in names:
            names.append(name)
    return names


def interpolate(
    message: str,
    interpolation: Optional[Mapping] = None,
    ignored_keys: Iterable[str] = (),
) -> Tuple[str, InterpolationReport]:
    """Substitute placeholders and account for what was used.

    A key present in `interpolation` is substituted with str(value), even
    when the value is None. Placeholders without a matching key stay in the
    output as-is.

    Args:
        message: Translation string with %{name} placeholders.
        interpolation: Replacement values keyed by placeholder name.
        ignored_keys: Supplied keys never reported as unused (e.g. "count"
            when it selected a plural form).

    Returns:
        Tuple of (interpolated message, InterpolationReport).
    """
    values: Mapping[str, Any] = interpolation or {}
    placeholders = find_placeholders(message)

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        return match.group(0)

    result = PLACEHOLDER_PATTERN.sub(_replace, message)

    remaining = [name for name in placeholders if name not in values]
    used = [name for name in placeholders if name in values]
    ignored = set(ignored_keys)
    unused = [
        key for key in values if key not in placeholders and key not in ignored
    ]

    return result, InterpolationReport.build(remaining, unused, used)
