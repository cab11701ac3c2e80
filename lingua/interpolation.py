"""Placeholder substitution for translated messages.

Placeholders use the ``{{name}}`` syntax. Names are matched literally
(``{{ name }}`` is the placeholder " name "), substitution is a single
pass, and placeholders without a value are left in the output as-is.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")

Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _as_dict(params: Params) -> Dict[str, str]:
    items = params.items() if isinstance(params, Mapping) else params
    values: Dict[str, str] = {}
    # Later pairs overwrite earlier ones with the same name
    for name, value in items:
        values[name] = str(value)
    return values


def substitute(template: str, params: Params = ()) -> str:
    """Replace ``{{name}}`` placeholders with parameter values.

    Args:
        template: Message with placeholders.
        params: ``(name, value)`` pairs or a mapping. When a name repeats,
            the last pair wins.

    Returns:
        Message with every known placeholder replaced. Unknown and malformed
        placeholders are kept verbatim; replacement text is not rescanned.

    Example:
        >>> substitute("Hello, {{name}}!", [("name", "World")])
        'Hello, World!'
        >>> substitute("Hello, {{name}}!", [])
        'Hello, {{name}}!'
    """
    values = _as_dict(params)
    if not values:
        return template

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in values:
            return values[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def placeholders(template: str) -> List[str]:
    """List distinct placeholder names in order of first appearance."""
    names: List[str] = []
    for name in PLACEHOLDER_PATTERN.findall(template):
        if name not in names:
            names.append(name)
    return names
