"""Tests for lingua.models module."""

import pytest

from lingua.errors import ErrorKind, MalformedKeyError
from lingua.models import BranchNode, ResourceTree, TextNode, TranslationKey
from tests.factories import make_resource_tree


class TestTranslationKey:
    """Tests for TranslationKey model."""

    def test_from_string_single_segment(self):
        """from_string() accepts a key without dots."""
        key = TranslationKey.from_string("welcome")
        assert key.segments == ("welcome",)
        assert str(key) == "welcome"

    def test_from_string_nested(self):
        """from_string() splits on every dot."""
        key = TranslationKey.from_string("menu.file.save")
        assert key.segments == ("menu", "file", "save")
        assert key.raw == "menu.file.save"

    @pytest.mark.parametrize("key", ["", ".menu", "menu.", "menu..save", "."])
    def test_from_string_malformed(self, key):
        """from_string() rejects empty keys and empty segments."""
        with pytest.raises(MalformedKeyError) as exc_info:
            TranslationKey.from_string(key)
        assert exc_info.value.kind is ErrorKind.MALFORMED_KEY
        assert exc_info.value.key == key

    def test_translation_key_is_hashable(self):
        """TranslationKey is frozen and can be used as a dict key."""
        key = TranslationKey.from_string("menu.file")
        assert {key: 1}[TranslationKey.from_string("menu.file")] == 1


class TestResourceTree:
    """Tests for ResourceTree model."""

    def test_from_data_builds_closed_variant(self):
        """from_data() converts strings and mappings into nodes."""
        tree = ResourceTree.from_data("en", {"menu": {"save": "Save"}, "hi": "Hi"})
        assert isinstance(tree.root, BranchNode)
        assert isinstance(tree.root.get("hi"), TextNode)
        assert isinstance(tree.root.get("menu"), BranchNode)
        assert tree.root.get("menu").get("save") == TextNode("Save")

    def test_from_data_records_metadata(self):
        """from_data() stores code and load timestamp."""
        tree = make_resource_tree("de")
        assert tree.code == "de"
        assert tree.loaded_at is not None

    def test_from_data_rejects_non_mapping_root(self):
        """from_data() raises ValueError when the document is not a mapping."""
        with pytest.raises(ValueError):
            ResourceTree.from_data("en", ["a", "b"])

    def test_from_data_rejects_self_containing_mapping(self):
        """from_data() raises ValueError for a mapping nested in itself."""
        menu = {"save": "Save"}
        menu["self"] = menu
        with pytest.raises(ValueError, match="menu.self"):
            ResourceTree.from_data("en", {"menu": menu})

    def test_from_data_allows_shared_mapping(self):
        """The same mapping may appear under several keys."""
        shared = {"ok": "OK"}
        tree = ResourceTree.from_data("en", {"first": shared, "second": shared})
        assert tree.flatten() == {"first.ok": "OK", "second.ok": "OK"}

    def test_from_data_drops_unsupported_leaves(self):
        """Numbers, booleans, null and lists are not kept in the tree."""
        tree = ResourceTree.from_data(
            "en",
            {"count": 3, "flag": True, "none": None, "list": ["a"], "ok": "Ok"},
        )
        assert list(tree.root.children) == ["ok"]

    def test_children_are_read_only(self):
        """Branch children cannot be modified after load."""
        tree = make_resource_tree()
        with pytest.raises(TypeError):
            tree.root.children["new"] = TextNode("x")

    def test_flatten(self):
        """flatten() returns every text leaf by dotted key."""
        tree = ResourceTree.from_data(
            "en", {"a": "A", "b": {"c": "C", "d": {"e": "E"}}}
        )
        assert tree.flatten() == {"a": "A", "b.c": "C", "b.d.e": "E"}

    def test_iter_leaves_keeps_document_order(self):
        """iter_leaves() walks children in document order."""
        tree = ResourceTree.from_data("en", {"z": "Z", "a": {"y": "Y", "b": "B"}})
        assert [key for key, _ in tree.iter_leaves()] == ["z", "a.y", "a.b"]
