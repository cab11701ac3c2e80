"""Translation models.

Defines the resource tree held for each language and the dotted
translation key used to address its leaves.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple, Union

from lingua.errors import MalformedKeyError
from lingua.logging import get_module_logger

logger = get_module_logger()

KEY_SEPARATOR = "."


@dataclass(frozen=True)
class TextNode:
    """Translatable string leaf."""

    value: str


@dataclass(frozen=True)
class BranchNode:
    """Named children of a tree node.

    Attributes:
        children: Read-only mapping of segment name to child node.
    """

    children: Mapping[str, "ResourceNode"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get(self, segment: str) -> Optional["ResourceNode"]:
        return self.children.get(segment)

    def __contains__(self, segment: object) -> bool:
        return segment in self.children

    def __len__(self) -> int:
        return len(self.children)


ResourceNode = Union[TextNode, BranchNode]


def build_node(
    data: Any,
    path: Tuple[str, ...] = (),
    ancestors: FrozenSet[int] = frozenset(),
) -> Optional[ResourceNode]:
    """Convert a decoded document value into a tree node.

    Strings become ``TextNode`` and mappings become ``BranchNode``. Any other
    value (numbers, booleans, null, lists) cannot be translated and is dropped.

    A mapping that contains itself (a recursive YAML alias such as
    ``menu: &m {self: *m}``) is rejected. Reusing one alias in sibling
    positions is fine.

    Args:
        data: Value produced by a decoder.
        path: Segments leading to ``data`` (for logging).
        ancestors: ``id()`` of the mappings enclosing ``data``.

    Returns:
        The converted node, or None if the value was dropped.

    Raises:
        ValueError: If a mapping is nested inside itself.
    """
    if isinstance(data, str):
        return TextNode(data)

    if isinstance(data, dict):
        if id(data) in ancestors:
            raise ValueError(
                f"Recursive alias at '{KEY_SEPARATOR.join(path)}'"
            )
        enclosing = ancestors | {id(data)}
        children: Dict[str, ResourceNode] = {}
        for name, value in data.items():
            segment = str(name)
            node = build_node(value, path + (segment,), enclosing)
            if node is not None:
                children[segment] = node
        return BranchNode(MappingProxyType(children))

    logger.warning(
        "skipped_non_text_leaf",
        key=KEY_SEPARATOR.join(path),
        value_type=type(data).__name__,
    )
    return None


@dataclass(frozen=True)
class ResourceTree:
    """All translations for a single language.

    Created once when the language file is loaded and never mutated.

    Attributes:
        code: Language code the tree belongs to (e.g. "en").
        root: Top-level branch of the tree.
        source: File the tree was decoded from, if any.
        loaded_at: Timestamp (ISO 8601) when the tree was built.
    """

    code: str
    root: BranchNode
    source: Optional[Path] = None
    loaded_at: Optional[str] = None

    @classmethod
    def from_data(
        cls,
        code: str,
        data: Any,
        source: Optional[Path] = None,
    ) -> "ResourceTree":
        """Build a tree from a decoded document.

        Args:
            code: Language code.
            data: Decoded document; must be a mapping.
            source: Path the document came from.

        Returns:
            ResourceTree instance.

        Raises:
            ValueError: If the document root is not a mapping or contains
                itself.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected a mapping at the document root, got {type(data).__name__}"
            )
        root = build_node(data)
        return cls(
            code=code,
            root=root,
            source=source,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

    def iter_leaves(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(dotted_key, text)`` for every text leaf, depth first."""
        stack = [((), self.root)]
        while stack:
            path, node = stack.pop()
            if isinstance(node, TextNode):
                yield KEY_SEPARATOR.join(path), node.value
                continue
            for name, child in reversed(list(node.children.items())):
                stack.append((path + (name,), child))

    def flatten(self) -> Dict[str, str]:
        """Return every text leaf keyed by its dotted path."""
        return dict(self.iter_leaves())


@dataclass(frozen=True)
class TranslationKey:
    """Dot-separated path to a text leaf (e.g. "menu.file.save").

    Each dot is a separator; literal dots cannot be escaped.

    Attributes:
        raw: The key as given by the caller.
        segments: Path segments in traversal order.
    """

    raw: str
    segments: Tuple[str, ...]

    def __str__(self) -> str:
        return self.raw

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Parse a dotted key.

        Args:
            key_string: Dot-separated key.

        Returns:
            TranslationKey instance.

        Raises:
            MalformedKeyError: If the key is empty or has an empty segment.
        """
        if not key_string:
            raise MalformedKeyError(key_string)
        segments = tuple(key_string.split(KEY_SEPARATOR))
        if any(segment == "" for segment in segments):
            raise MalformedKeyError(key_string)
        return cls(raw=key_string, segments=segments)
