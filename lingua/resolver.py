"""Key resolution against a single resource tree."""

from typing import Union

from lingua.errors import KeyNotFoundError, MalformedKeyError
from lingua.models import BranchNode, ResourceTree, TextNode, TranslationKey

KeyLike = Union[str, TranslationKey]


def _parse(key: KeyLike) -> TranslationKey:
    if isinstance(key, TranslationKey):
        return key
    return TranslationKey.from_string(key)


def resolve(tree: ResourceTree, key: KeyLike) -> str:
    """Return the text stored under a dotted key.

    Every segment but the last must name a branch, and the last one must
    name a text leaf. A key that stops at a branch is not a translation.

    Args:
        tree: Tree to search.
        key: Dotted key or parsed TranslationKey.

    Returns:
        The raw (unsubstituted) text.

    Raises:
        MalformedKeyError: If the key is empty or has an empty segment.
        KeyNotFoundError: If the path does not lead to a text leaf. The error
            carries the full key, not the failing segment.
    """
    parsed = _parse(key)

    node = tree.root
    for segment in parsed.segments:
        if not isinstance(node, BranchNode):
            raise KeyNotFoundError(parsed.raw)
        child = node.get(segment)
        if child is None:
            raise KeyNotFoundError(parsed.raw)
        node = child

    if isinstance(node, TextNode):
        return node.value
    raise KeyNotFoundError(parsed.raw)


def has_key(tree: ResourceTree, key: KeyLike) -> bool:
    """Check whether a key resolves to a text leaf.

    Malformed keys are reported as absent.
    """
    try:
        resolve(tree, key)
    except (KeyNotFoundError, MalformedKeyError):
        return False
    return True
